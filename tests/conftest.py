import pytest
from workers_kv.config import Config


@pytest.fixture
def config() -> Config:
    return Config(email="me@example.com", key="secret", account_id="acct")
