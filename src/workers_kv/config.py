from dataclasses import dataclass
from typing import Mapping

ENV_TO_OPTION = {
    "CLOUDFLARE_AUTH_EMAIL": "email",
    "CLOUDFLARE_AUTH_KEY": "key",
    "CLOUDFLARE_ACCOUNT_ID": "accountId",
    "CLOUDFLARE_ZONE_ID": "zoneId",
}

REQUIRED = ("email", "key", "accountId")


class ConfigurationError(Exception):
    missing: list[str]

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "The following options must be set as environment variables or "
            f"parameters: {', '.join(REQUIRED)}"
        )


@dataclass(frozen=True)
class Config:
    email: str
    key: str
    account_id: str
    # not used by any command yet
    zone_id: str | None = None


def merge(
    options: Mapping[str, str | None], environ: Mapping[str, str]
) -> dict[str, str | None]:
    """
    Environment variables override options, they are not a fallback. Unset
    and empty variables leave the option alone.
    """
    merged = dict(options)
    for env, option in ENV_TO_OPTION.items():
        if environ.get(env):
            merged[option] = environ[env]
    return merged


def resolve(options: Mapping[str, str | None], environ: Mapping[str, str]) -> Config:
    merged = merge(options, environ)
    missing = [option for option in REQUIRED if not merged.get(option)]
    if missing:
        raise ConfigurationError(missing)

    return Config(
        email=merged["email"],  # type: ignore
        key=merged["key"],  # type: ignore
        account_id=merged["accountId"],  # type: ignore
        zone_id=merged.get("zoneId") or None,
    )
