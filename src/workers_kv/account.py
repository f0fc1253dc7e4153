from urllib.parse import quote

from workers_kv.config import Config
from workers_kv.http import HTTPMixin
from workers_kv.types import Request

from .namespace import Namespace


class Account(HTTPMixin):
    config: Config

    def __init__(self, config: Config):
        self.config = config

    def __str__(self) -> str:
        return self.config.account_id

    def base_path(self) -> str:
        return quote(self.config.account_id, safe="")

    def namespaces(self, page: int = 1, per_page: int = 20) -> Request:
        return self.get("/storage/kv/namespaces", query={"page": page, "per_page": per_page})

    def create_namespace(self, title: str) -> Request:
        return self.post("/storage/kv/namespaces", json={"title": title})

    def namespace(self, id: str) -> Namespace:
        return Namespace(self, id)
