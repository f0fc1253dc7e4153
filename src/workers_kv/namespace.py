from typing import TYPE_CHECKING
from urllib.parse import quote

from workers_kv.types import Request

from .key import Key

if TYPE_CHECKING:
    from .account import Account


class Namespace:
    account: "Account"
    id: str

    def __init__(self, account: "Account", id: str):
        self.account = account
        self.id = id

    def __str__(self) -> str:
        return f"{self.account}/{self.id}"

    @property
    def path(self) -> str:
        return f"/storage/kv/namespaces/{quote(self.id, safe='')}"

    def destroy(self) -> Request:
        return self.account.delete(self.path)

    def rename(self, title: str) -> Request:
        return self.account.put(self.path, json={"title": title})

    def keys(
        self, limit: int = 25, cursor: str | None = None, prefix: str | None = None
    ) -> Request:
        query: dict[str, int | str] = {"limit": limit}
        if cursor:
            query["cursor"] = cursor
        if prefix:
            query["prefix"] = prefix
        return self.account.get(f"{self.path}/keys", query=query)

    def key(self, name: str) -> Key:
        return Key(self, name)
