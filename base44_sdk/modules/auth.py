"""Auth module: current user, login/logout redirects and token handling."""

from typing import Any
from urllib.parse import quote

import httpx

from base44_sdk._internal.transport.client import HttpTransport
from base44_sdk._internal.transport.models import JSON_CONTENT_TYPE, join_path
from base44_sdk.exceptions import Base44Error
from base44_sdk.models import Entity, Navigator

_JSON_HEADERS = {"Content-Type": JSON_CONTENT_TYPE}


class AuthModule:
    """Authentication operations against `auth/*`.

    Redirects go through the optional `navigate` sink. Without one (server
    context), login and the logout redirect are no-ops.
    """

    def __init__(self, transport: HttpTransport, navigate: Navigator | None = None) -> None:
        self._transport = transport
        self._navigate = navigate

    async def me(self) -> Entity:
        """Fetch the current user."""
        return await self._transport.request("auth/me", method="GET")

    async def update_me(self, data: dict[str, Any]) -> Entity:
        """Update fields of the current user."""
        return await self._transport.request("auth/me", method="PATCH", json_body=data, headers=_JSON_HEADERS)

    def login_url(self, next_url: str | None = None) -> str:
        """Absolute URL of the login page, optionally returning to `next_url`."""
        path = "auth/login"
        if next_url:
            path += f"?next={quote(next_url, safe='')}"
        return str(httpx.URL(self._transport.base_url).join(path))

    def login(self, next_url: str | None = None) -> str:
        """Send the user to the login page.

        Args:
            next_url: Where the platform should return after login.

        Returns:
            The login URL, whether or not a navigator was configured.
        """
        url = self.login_url(next_url)
        if self._navigate is not None:
            self._navigate(url)
        return url

    async def logout(self, redirect_url: str | None = None) -> None:
        """End the session, forget the token and optionally redirect.

        The persisted token is removed only after the server accepted the
        logout; a failed request leaves the token in place.
        """
        await self._transport.request("auth/logout", method="POST")
        self._transport.set_token(None, persist=True)
        if redirect_url and self._navigate is not None:
            self._navigate(redirect_url)

    def set_token(self, token: str | None, persist: bool = False) -> None:
        self._transport.set_token(token, persist)

    async def is_authenticated(self) -> bool:
        """Check whether the current token is accepted by the server."""
        try:
            await self._transport.request("auth/me", method="GET")
        except (Base44Error, httpx.HTTPError):
            return False
        return True

    async def call(self, name: str, data: dict[str, Any] | None = None) -> Any:
        """POST to any other `auth/<name>` endpoint."""
        return await self._transport.request(
            f"auth/{join_path(name)}",
            method="POST",
            json_body=data if data is not None else {},
            headers=_JSON_HEADERS,
        )
