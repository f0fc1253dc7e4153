import json as jsonlib
from typing import Any
from urllib.parse import urlencode

import requests
from workers_kv.config import Config
from workers_kv.log import logger
from workers_kv.types import Outcome, Request

BASE_URL = "https://api.cloudflare.com/client/v4/accounts/"


def session() -> requests.Session:
    return requests.Session()


def body_text(resp: requests.Response) -> str:
    # requests assumes latin-1 for text/* without a charset
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    return resp.text


def render(resp: requests.Response) -> tuple[str, bool]:
    if not resp.content:
        return "", False

    text = body_text(resp)
    try:
        data = jsonlib.loads(text)
    except (ValueError, RecursionError):
        return text, False
    return jsonlib.dumps(data, indent=2, ensure_ascii=False), True


def dispatch(request: Request, sess: requests.Session | None = None) -> Outcome:
    """
    Send a single request and render its response.

    Error statuses are not raised, the body of a 4xx or 5xx is rendered like
    any other. Connection level failures propagate as
    `requests.RequestException`.
    """
    method = request["method"]
    url = f"{BASE_URL}{request['path']}"
    body = request.get("body")

    if sess is None:
        sess = session()

    logger.debug(f"{method} {url}")
    resp = sess.request(
        method,
        url,
        headers=request["headers"],
        data=body.encode("utf-8") if body is not None else None,
    )
    logger.debug(f"{method} {url} {resp.status_code}")

    output, is_json = render(resp)
    if resp.status_code >= 400:
        logger.debug(f"  body: {output}")

    return Outcome(output, 0 if resp.status_code == 200 else 1, resp.status_code, is_json)


class HTTPMixin:
    config: Config

    def base_path(self) -> str:
        raise NotImplementedError

    def headers(self) -> dict[str, str]:
        return {
            "X-Auth-Email": self.config.email,
            "X-Auth-Key": self.config.key,
        }

    def request(
        self,
        method: str,
        path: str,
        query: dict[str, Any] | None = None,
        json: Any = None,
        text: str | None = None,
    ) -> Request:
        path = f"{self.base_path()}{path}"
        if query:
            path = f"{path}?{urlencode(query)}"

        req: Request = {"path": path, "method": method, "headers": self.headers()}
        if json is not None:
            req["headers"]["Content-Type"] = "application/json"
            req["body"] = jsonlib.dumps(json)
        elif text is not None:
            req["headers"]["Content-Type"] = "text/plain"
            req["body"] = text
        return req

    def get(self, path: str, query: dict[str, Any] | None = None) -> Request:
        return self.request("GET", path, query=query)

    def post(self, path: str, json: Any = None) -> Request:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None, text: str | None = None) -> Request:
        return self.request("PUT", path, json=json, text=text)

    def delete(self, path: str) -> Request:
        return self.request("DELETE", path)
