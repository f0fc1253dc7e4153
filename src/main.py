import sys

import cli
import click
import requests
from workers_kv.log import logger


def run():
    try:
        cli.main(prog_name="cfwkv")
    except requests.RequestException as e:
        click.echo(f"error: {e}", err=True)
        logger.debug("request failed", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    run()
