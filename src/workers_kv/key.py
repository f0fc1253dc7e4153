from typing import TYPE_CHECKING
from urllib.parse import quote

from workers_kv.types import Request

if TYPE_CHECKING:
    from .account import Account
    from .namespace import Namespace


class Key:
    namespace: "Namespace"
    name: str

    def __init__(self, namespace: "Namespace", name: str):
        self.namespace = namespace
        self.name = name

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"

    @property
    def account(self) -> "Account":
        return self.namespace.account

    @property
    def path(self) -> str:
        return f"{self.namespace.path}/values/{quote(self.name, safe='')}"

    def get(self) -> Request:
        return self.account.get(self.path)

    def set(self, value: str) -> Request:
        return self.account.put(self.path, text=value)

    def destroy(self) -> Request:
        return self.account.delete(self.path)
