import logging
import sys

logger = logging.getLogger("workers_kv")
handler = logging.StreamHandler(sys.stderr)

if sys.stderr.isatty():
    handler.setFormatter(
        logging.Formatter(
            "\033[93m%(levelname)s\033[0m %(message)s \033[95m(%(filename)s:%(lineno)d)\033[0m"
        )
    )
else:
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

logger.addHandler(handler)


def set_verbose(verbose: bool):
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
