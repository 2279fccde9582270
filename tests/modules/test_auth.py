"""Tests for the auth module."""

import json

import httpx
import pytest

from base44_sdk._internal.transport.storage import MemoryStorage
from base44_sdk.exceptions import Base44Error
from base44_sdk.modules.auth import AuthModule


@pytest.fixture
def navigated() -> list[str]:
    return []


class TestAuthRequests:
    """Tests for me/update_me/call."""

    @pytest.mark.asyncio
    async def test_me(self, make_transport, recorder):
        recorder.response = httpx.Response(200, json={"data": {"id": "u1", "email": "a@b.c"}})
        auth = AuthModule(make_transport(token="tok"))

        assert await auth.me() == {"id": "u1", "email": "a@b.c"}
        assert recorder.last.method == "GET"
        assert recorder.last.url.path == "/api/apps/123/auth/me"

    @pytest.mark.asyncio
    async def test_update_me(self, make_transport, recorder):
        await AuthModule(make_transport()).update_me({"full_name": "Ada"})
        assert recorder.last.method == "PATCH"
        assert recorder.last.url.path == "/api/apps/123/auth/me"
        assert json.loads(recorder.last.content) == {"full_name": "Ada"}

    @pytest.mark.asyncio
    async def test_call_other_endpoint(self, make_transport, recorder):
        """Should POST to auth/<name> with {} by default."""
        await AuthModule(make_transport()).call("resetPassword")
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/apps/123/auth/resetPassword"
        assert json.loads(recorder.last.content) == {}


class TestAuthLogin:
    """Tests for login redirects."""

    def test_login_navigates(self, make_transport, navigated):
        auth = AuthModule(make_transport(), navigate=navigated.append)
        url = auth.login()
        assert url == "https://app.test/api/apps/123/auth/login"
        assert navigated == [url]

    def test_login_with_next_url(self, make_transport, navigated):
        """Should percent-encode the next URL."""
        auth = AuthModule(make_transport(), navigate=navigated.append)
        url = auth.login("https://my.app/dashboard?tab=1")
        assert url == (
            "https://app.test/api/apps/123/auth/login"
            "?next=https%3A%2F%2Fmy.app%2Fdashboard%3Ftab%3D1"
        )
        assert navigated == [url]

    def test_login_without_navigator_is_noop(self, make_transport, recorder):
        """Should only compute the URL in server contexts."""
        url = AuthModule(make_transport()).login()
        assert url.endswith("/auth/login")
        assert recorder.requests == []


class TestAuthLogout:
    """Tests for logout."""

    @pytest.mark.asyncio
    async def test_logout_clears_persisted_token(self, make_transport, recorder):
        storage = MemoryStorage({"__b44_token__": "tok"})
        transport = make_transport(storage=storage)

        await AuthModule(transport).logout()

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/apps/123/auth/logout"
        assert recorder.last.headers["authorization"] == "Bearer tok"
        assert transport.token is None
        assert storage.get_item("__b44_token__") is None

    @pytest.mark.asyncio
    async def test_logout_redirects(self, make_transport, navigated):
        auth = AuthModule(make_transport(token="tok"), navigate=navigated.append)
        await auth.logout("https://my.app/")
        assert navigated == ["https://my.app/"]

    @pytest.mark.asyncio
    async def test_logout_without_redirect_does_not_navigate(self, make_transport, navigated):
        await AuthModule(make_transport(token="tok"), navigate=navigated.append).logout()
        assert navigated == []

    @pytest.mark.asyncio
    async def test_failed_logout_keeps_token(self, make_transport, recorder):
        """Should propagate the error and leave the token in place."""
        recorder.response = httpx.Response(500, text="boom")
        storage = MemoryStorage({"__b44_token__": "tok"})
        transport = make_transport(storage=storage)

        with pytest.raises(Base44Error):
            await AuthModule(transport).logout()

        assert transport.token == "tok"
        assert storage.get_item("__b44_token__") == "tok"


class TestAuthIsAuthenticated:
    """Tests for is_authenticated."""

    @pytest.mark.asyncio
    async def test_true_on_success(self, make_transport, recorder):
        recorder.response = httpx.Response(200, json={"id": "u1"})
        assert await AuthModule(make_transport(token="tok")).is_authenticated() is True

    @pytest.mark.asyncio
    async def test_false_on_http_error(self, make_transport, recorder):
        recorder.response = httpx.Response(401, json={"message": "unauthorized"})
        assert await AuthModule(make_transport()).is_authenticated() is False

    @pytest.mark.asyncio
    async def test_false_on_network_error(self, make_transport, recorder):
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        recorder.responder = fail
        assert await AuthModule(make_transport()).is_authenticated() is False

    @pytest.mark.asyncio
    async def test_idempotent(self, make_transport, recorder):
        """Should return the same answer without changing the token."""
        recorder.response = httpx.Response(401)
        transport = make_transport(token="tok")
        auth = AuthModule(transport)

        results = [await auth.is_authenticated() for _ in range(3)]

        assert results == [False, False, False]
        assert transport.token == "tok"
        assert all(r.url.path.endswith("/auth/me") for r in recorder.requests)


def test_set_token(make_transport):
    storage = MemoryStorage()
    transport = make_transport(storage=storage)
    AuthModule(transport).set_token("new", persist=True)
    assert transport.token == "new"
    assert storage.get_item("__b44_token__") == "new"
