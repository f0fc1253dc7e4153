import json

from workers_kv.account import Account
from workers_kv.config import Config

AUTH = {"X-Auth-Email": "me@example.com", "X-Auth-Key": "secret"}


def test_list_namespaces_defaults(config: Config):
    req = Account(config).namespaces()

    assert req == {
        "path": "acct/storage/kv/namespaces?page=1&per_page=20",
        "method": "GET",
        "headers": AUTH,
    }


def test_create_namespace_sends_json_title(config: Config):
    req = Account(config).create_namespace("My Own Namespace")

    assert req["method"] == "POST"
    assert req["path"] == "acct/storage/kv/namespaces"
    assert req["headers"]["Content-Type"] == "application/json"
    assert json.loads(req["body"]) == {"title": "My Own Namespace"}


def test_rename_and_destroy_namespace(config: Config):
    ns = Account(config).namespace("0f2ac74b")

    rename = ns.rename("renamed")
    assert rename["method"] == "PUT"
    assert rename["path"] == "acct/storage/kv/namespaces/0f2ac74b"
    assert json.loads(rename["body"]) == {"title": "renamed"}

    destroy = ns.destroy()
    assert destroy["method"] == "DELETE"
    assert destroy["path"] == "acct/storage/kv/namespaces/0f2ac74b"
    assert "body" not in destroy
    assert destroy["headers"] == AUTH


def test_list_keys_appends_cursor_then_prefix(config: Config):
    req = Account(config).namespace("ns1").keys(limit=100, cursor="abc", prefix="X")

    assert req["path"] == "acct/storage/kv/namespaces/ns1/keys?limit=100&cursor=abc&prefix=X"


def test_list_keys_omits_empty_cursor_and_prefix(config: Config):
    req = Account(config).namespace("ns1").keys(cursor="", prefix=None)

    assert req["path"] == "acct/storage/kv/namespaces/ns1/keys?limit=25"


def test_list_keys_encodes_query_values(config: Config):
    req = Account(config).namespace("ns1").keys(prefix="a&b=c d")

    assert req["path"].endswith("?limit=25&prefix=a%26b%3Dc+d")


def test_set_key_sends_plain_text(config: Config):
    req = Account(config).namespace("ns1").key("foo").set("bar")

    assert req == {
        "path": "acct/storage/kv/namespaces/ns1/values/foo",
        "method": "PUT",
        "headers": {**AUTH, "Content-Type": "text/plain"},
        "body": "bar",
    }


def test_set_key_keeps_empty_value(config: Config):
    req = Account(config).namespace("ns1").key("foo").set("")

    assert req["body"] == ""
    assert req["headers"]["Content-Type"] == "text/plain"


def test_delete_key_uses_delete_without_body(config: Config):
    req = Account(config).namespace("ns1").key("foo").destroy()

    assert req == {
        "path": "acct/storage/kv/namespaces/ns1/values/foo",
        "method": "DELETE",
        "headers": AUTH,
    }


def test_path_segments_are_percent_encoded(config: Config):
    req = Account(config).namespace("ns/1").key("a/b c?").get()

    assert req["path"] == "acct/storage/kv/namespaces/ns%2F1/values/a%2Fb%20c%3F"
