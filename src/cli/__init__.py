import os

import click
from workers_kv import __version__
from workers_kv.log import set_verbose

from .http import credential_options
from .key import key
from .namespace import namespace


@click.group()
@click.version_option(__version__, prog_name="cfwkv")
@click.option(
    "-v",
    "--verbose",
    default=False,
    is_flag=True,
    help="Log requests to stderr. Use --version for the version.",
)
@credential_options
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    email: str | None,
    key: str | None,
    account_id: str | None,
    zone_id: str | None,
):
    "Manage Cloudflare Workers KV namespaces and keys."
    set_verbose(verbose)
    ctx.obj = {
        "options": {
            "email": email,
            "key": key,
            "accountId": account_id,
            "zoneId": zone_id,
        },
        # the only read of the process environment
        "environ": dict(os.environ),
    }


main.add_command(namespace)
main.add_command(key)
