"""Public models for the Base44 SDK."""

import os
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel, Field, field_validator

from base44_sdk._internal.transport.models import DEFAULT_STORAGE_KEY
from base44_sdk._internal.transport.storage import TokenStorage

# Entity records are opaque; the platform guarantees an "id" key.
Entity = dict[str, Any]

Navigator = Callable[[str], None]


class ClientConfig(BaseModel):
    """Configuration for a Base44Client. Immutable once built.

    Required fields:
        server_url: Base URL of the app's API, e.g. "https://app.base44.com/api/apps/123"

    Optional fields:
        token: Bearer token. Takes precedence over any persisted token.
        service_token: Token for the service-role sub-client (defaults to token)
        storage_key: Key the token is persisted under (default: "__b44_token__")
        storage: Durable store for the token; None disables persistence
        transport: httpx transport override (e.g. httpx.MockTransport)
        navigate: Redirect sink used by login/logout; None makes them no-ops
        timeout: Request timeout in seconds; None leaves it to the caller
        debug: Enable debug logging to stderr
    """

    server_url: str
    token: str | None = None
    service_token: str | None = None
    storage_key: str = DEFAULT_STORAGE_KEY
    storage: TokenStorage | None = None
    transport: httpx.AsyncBaseTransport | None = None
    navigate: Navigator | None = None
    timeout: float | None = Field(default=None, gt=0)
    debug: bool = False

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("server_url")
    @classmethod
    def server_url_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("server_url must not be empty")
        return v

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Create a config from environment variables.

        Environment variables:
            BASE44_SERVER_URL: Base URL of the API (required).
            BASE44_TOKEN: Bearer token.
            BASE44_SERVICE_TOKEN: Token for the service-role sub-client.
            BASE44_STORAGE_KEY: Key for the persisted token.
            BASE44_TIMEOUT: Request timeout in seconds.
            BASE44_DEBUG: Set to "1" to enable debug logging.

        Args:
            **overrides: Fields that take precedence over the environment
                (e.g. storage, transport, navigate).

        Returns:
            A ClientConfig.

        Raises:
            ValueError: If BASE44_TIMEOUT is not a number.
            pydantic.ValidationError: If BASE44_SERVER_URL is missing.
        """
        values: dict[str, Any] = {
            "server_url": os.environ.get("BASE44_SERVER_URL"),
            "token": os.environ.get("BASE44_TOKEN"),
            "service_token": os.environ.get("BASE44_SERVICE_TOKEN"),
            "debug": os.environ.get("BASE44_DEBUG", "") == "1",
        }
        storage_key = os.environ.get("BASE44_STORAGE_KEY")
        if storage_key:
            values["storage_key"] = storage_key
        timeout = os.environ.get("BASE44_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        values.update(overrides)
        return cls(**values)


__all__ = ["ClientConfig", "Entity", "Navigator"]
