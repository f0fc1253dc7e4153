from typing import NamedTuple, NotRequired, TypedDict


class Request(TypedDict):
    path: str
    method: str
    headers: dict[str, str]
    body: NotRequired[str]


class Outcome(NamedTuple):
    output: str
    exit_code: int
    status_code: int
    is_json: bool = False
