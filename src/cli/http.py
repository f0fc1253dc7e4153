import functools
from typing import Callable

import click
from rich.console import Console
from rich.syntax import Syntax
from workers_kv.account import Account
from workers_kv.config import ConfigurationError, resolve
from workers_kv.http import dispatch
from workers_kv.log import logger
from workers_kv.types import Outcome, Request

auth_options = [
    click.option(
        "--email",
        help="The email associated with the authentication key. Exporting CLOUDFLARE_AUTH_EMAIL will override.",
    ),
    click.option(
        "--key",
        help="The authentication key for Cloudflare access. Exporting CLOUDFLARE_AUTH_KEY will override.",
    ),
    click.option(
        "--accountId",
        "--account-id",
        "account_id",
        help="The Cloudflare account identifier. Exporting CLOUDFLARE_ACCOUNT_ID will override.",
    ),
    click.option(
        "--zoneId",
        "--zone-id",
        "zone_id",
        help="The Cloudflare zone identifier. Exporting CLOUDFLARE_ZONE_ID will override.",
    ),
]


def credential_options(f: Callable) -> Callable:
    for option in reversed(auth_options):
        f = option(f)
    return f


def with_account(f: Callable) -> Callable:
    """
    Adds the credential options to a command and replaces them with a resolved
    `Account` as the first argument.

    A value given after the subcommand wins over one given before it, and the
    environment wins over both. Exits with 1 before the command runs if a
    required credential is missing.
    """

    @functools.wraps(f)
    def wrapper(
        email: str | None,
        key: str | None,
        account_id: str | None,
        zone_id: str | None,
        **kwargs,
    ):
        ctx = click.get_current_context()
        root = ctx.find_root().obj or {}
        options = dict(root.get("options", {}))
        given = {
            "email": email,
            "key": key,
            "accountId": account_id,
            "zoneId": zone_id,
        }
        options.update({k: v for k, v in given.items() if v})
        try:
            config = resolve(options, root.get("environ", {}))
        except ConfigurationError as e:
            logger.debug(f"missing options: {', '.join(e.missing)}")
            click.echo(str(e), err=True)
            ctx.exit(1)
        return f(Account(config), **kwargs)

    return credential_options(wrapper)


def show(outcome: Outcome):
    if not outcome.output:
        return

    console = Console()
    if console.is_terminal and outcome.is_json:
        # soft wrap so long values such as cursors are never cropped
        text = Syntax(outcome.output, "json").highlight(outcome.output)
        console.print(text, soft_wrap=True)
    else:
        click.echo(outcome.output, nl=console.is_terminal)


def do_request(request: Request):
    console = Console(stderr=True)
    with console.status("waiting for response..."):
        outcome = dispatch(request)
    show(outcome)
    click.get_current_context().exit(outcome.exit_code)
