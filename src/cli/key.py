import click
from utils import int_or_default
from workers_kv.account import Account

from .http import do_request, with_account


@click.group()
def key():
    "Read and write the keys of a namespace."


@key.command()
@click.argument("namespace_id")
@click.option(
    "--limit",
    help="The number of keys to include in the result set. Default: 25. Min: 10. Max: 1000",
)
@click.option(
    "--cursor",
    help='Token indicating the position from which to continue when requesting the next set of records. See the "result_info" for a value.',
)
@click.option(
    "--prefix",
    help="Filter which keys will be returned. Exact matches and any key names that begin with the prefix will be returned.",
)
@with_account
def list(
    account: Account,
    namespace_id: str,
    limit: str | None,
    cursor: str | None,
    prefix: str | None,
):
    "List all keys in a namespace."
    ns = account.namespace(namespace_id)
    do_request(ns.keys(limit=int_or_default(limit, 25), cursor=cursor, prefix=prefix))


@key.command()
@click.argument("namespace_id")
@click.argument("name")
@with_account
def get(account: Account, namespace_id: str, name: str):
    "Read the key value for the namespace."
    do_request(account.namespace(namespace_id).key(name).get())


@key.command()
@click.argument("namespace_id")
@click.argument("name")
@click.argument("value")
@with_account
def set(account: Account, namespace_id: str, name: str, value: str):
    "Create or update the key value for the namespace."
    do_request(account.namespace(namespace_id).key(name).set(value))


@key.command()
@click.argument("namespace_id")
@click.argument("name")
@with_account
def delete(account: Account, namespace_id: str, name: str):
    "Delete the key from the namespace."
    do_request(account.namespace(namespace_id).key(name).destroy())
