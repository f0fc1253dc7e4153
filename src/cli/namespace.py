import click
from utils import int_or_default
from workers_kv.account import Account

from .http import do_request, with_account


@click.group()
def namespace():
    "Manage the KV namespaces of an account."


@namespace.command()
@click.option("--page", help="Pagination offset of the result set. Default: 1")
@click.option(
    "--perPage",
    "--per-page",
    "per_page",
    help="Number of namespaces to include per request. Default: 20",
)
@with_account
def list(account: Account, page: str | None, per_page: str | None):
    "List namespaces owned by the account."
    do_request(
        account.namespaces(
            page=int_or_default(page, 1), per_page=int_or_default(per_page, 20)
        )
    )


@namespace.command()
@click.argument("title")
@with_account
def create(account: Account, title: str):
    "Create a namespace."
    do_request(account.create_namespace(title))


@namespace.command()
@click.argument("namespace_id")
@with_account
def delete(account: Account, namespace_id: str):
    "Delete a namespace."
    do_request(account.namespace(namespace_id).destroy())


@namespace.command()
@click.argument("namespace_id")
@click.argument("title")
@with_account
def rename(account: Account, namespace_id: str, title: str):
    "Rename the title of a namespace."
    do_request(account.namespace(namespace_id).rename(title))
