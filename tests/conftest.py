"""Shared fixtures: a recording httpx transport and client factories."""

from collections.abc import Callable

import httpx
import pytest

from base44_sdk import ClientConfig, MemoryStorage, create_client
from base44_sdk._internal.transport.client import HttpTransport

SERVER_URL = "https://app.test/api/apps/123"
BASE_URL = SERVER_URL + "/"


class Recorder:
    """httpx.MockTransport handler that records requests.

    Responds with `response` (or the result of `responder(request)`).
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"ok": True})
        self.responder: Callable[[httpx.Request], httpx.Response] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responder is not None:
            return self.responder(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def mock_transport(recorder: Recorder) -> httpx.MockTransport:
    return httpx.MockTransport(recorder)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def make_transport(mock_transport: httpx.MockTransport):
    def factory(**kwargs) -> HttpTransport:
        kwargs.setdefault("server_url", SERVER_URL)
        return HttpTransport(http_client=httpx.AsyncClient(transport=mock_transport), **kwargs)

    return factory


@pytest.fixture
def make_client(mock_transport: httpx.MockTransport, storage: MemoryStorage):
    def factory(**options):
        options.setdefault("server_url", SERVER_URL)
        options.setdefault("transport", mock_transport)
        options.setdefault("storage", storage)
        return create_client(ClientConfig(**options))

    return factory
