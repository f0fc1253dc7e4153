import re


def int_or_default(value: str | int | None, default: int) -> int:
    """
    Parse a numeric option the way `parseInt(value, 10) || default` does: the
    leading digits count, anything after them is ignored, and a missing,
    junk or zero value gives `default`.
    """
    if value is None:
        return default
    match = re.match(r"\s*([+-]?\d+)", str(value))
    if not match:
        return default
    return int(match.group(1)) or default
