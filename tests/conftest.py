from typing import Generator

import pytest

from requestbuilder import RequestBuilder
from requestbuilder._utils.constants import (
    ENV_BASE_PATH,
    ENV_ERROR_HEADER,
    ENV_HOST,
    ENV_PORT,
    ENV_SCHEME,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for env_var in (ENV_HOST, ENV_BASE_PATH, ENV_PORT, ENV_SCHEME, ENV_ERROR_HEADER):
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def host() -> str:
    return "api.example.com"


@pytest.fixture
def base_path() -> str:
    return "/v1"


@pytest.fixture
def base_url(host: str, base_path: str) -> str:
    return f"http://{host}{base_path}"


@pytest.fixture
def builder(host: str, base_path: str) -> Generator[RequestBuilder, None, None]:
    with RequestBuilder(host=host, base_path=base_path) as request_builder:
        yield request_builder
