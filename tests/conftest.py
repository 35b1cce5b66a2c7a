from typing import Callable, List

import httpx
import pytest

from grest import GRest, Transport


class Recorder:
    """httpx.MockTransport handler keeping every request it receives."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: (
            httpx.Response(200, json={"id": 1, "name": "Ann"})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("GREST_URL", raising=False)
    monkeypatch.delenv("GREST_AUTHORIZATION", raising=False)
    monkeypatch.delenv("GREST_DISABLE_SSL_VERIFY", raising=False)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def transport(recorder):
    return Transport(transport=httpx.MockTransport(recorder))


@pytest.fixture
def api(transport):
    client = GRest("https://api.net", transport=transport)
    client.endpoints(["users", "support-tickets", "auth/login"])
    yield client
    client.close()


@pytest.fixture
def messages(api):
    received = []
    api.subscribe("test", received.append)
    return received
