"""Pytest configuration and shared fixtures."""

import io
import json
import sys

import httpx
import pytest

from synq.core.api_client import APIClient
from synq.core.config import ConfigStore
from synq.main import SynqCLI

TEST_API_KEY = "sk_test_0123456789abcdef"


class FakeStdin(io.StringIO):
    """Empty, non-interactive stdin; tests may patch isatty on it."""

    def isatty(self):
        return False


class FakeSynqAPI:
    """Stand-in for the SYNQ service behind an httpx.MockTransport.

    Records every request and answers from a per-endpoint table. Unknown
    endpoints answer 200 with an empty object.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, dict]] = {}
        self.error: Exception | None = None

    def respond(self, endpoint: str, json=None, status_code: int = 200, text: str | None = None):
        if text is not None:
            self.routes[endpoint] = (status_code, {"text": text})
        else:
            self.routes[endpoint] = (status_code, {"json": json if json is not None else {}})

    def refuse_connections(self):
        self.error = httpx.ConnectError("[Errno 111] Connection refused")

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        endpoint = request.url.path.removeprefix("/v1")
        status_code, content = self.routes.get(endpoint, (200, {"json": {}}))
        return httpx.Response(status_code, **content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real home directory and from a TTY stdin."""
    monkeypatch.setenv("SYNQ_CONFIG_DIR", str(tmp_path / "env-config"))
    monkeypatch.setattr(sys, "stdin", FakeStdin(""))


@pytest.fixture
def store(tmp_path):
    """An empty config store in a temporary directory."""
    return ConfigStore(tmp_path / "synq" / "config.json")


@pytest.fixture
def configured_store(store):
    """A config store that already holds an API key."""
    store.set("apiKey", TEST_API_KEY)
    return store


@pytest.fixture
def fake_api():
    return FakeSynqAPI()


@pytest.fixture
def api_client(configured_store, fake_api):
    client = APIClient(configured_store, transport=fake_api.transport)
    yield client
    client.close()


@pytest.fixture
def run_cli(store, fake_api):
    """Run the CLI against the fake API and return the exit code."""

    def _run(*argv: str) -> int:
        return SynqCLI(store, transport=fake_api.transport).run(list(argv))

    return _run
