"""User-facing clients for the Base44 platform.

Example usage:
    from base44_sdk import create_client

    async with create_client(server_url="https://app.base44.com/api/apps/123") as client:
        todos = await client.entities.Todo.filter({"done": False}, sort="-created_date")
        await client.integrations.Core.SendEmail({"to": "a@b.c", "body": "hi"})

        # Anything else is dispatched dynamically
        result = await client.functions.generateReport({"month": "2024-01"})
        status = await client.call("status")
"""

from typing import Any

from base44_sdk._internal.dispatch.client import DynamicModule, IntegrationsModule
from base44_sdk._internal.http import create_http_client
from base44_sdk._internal.transport.client import HttpTransport
from base44_sdk.exceptions import Base44ConfigError
from base44_sdk.models import ClientConfig
from base44_sdk.modules.auth import AuthModule
from base44_sdk.modules.entities import EntitiesModule


class _DynamicFallback:
    """Binds unknown public attributes to cached DynamicModules."""

    _transport: HttpTransport
    _modules: dict[str, DynamicModule]

    def module(self, name: str) -> DynamicModule:
        """Return the memoized dynamic module rooted at `name`."""
        mod = self._modules.get(name)
        if mod is None:
            mod = DynamicModule(name, self._transport)
            self._modules[name] = mod
        return mod

    def __getattr__(self, name: str) -> DynamicModule:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.module(name)


class ServiceRoleClient(_DynamicFallback):
    """Privileged sub-client for server-side calls.

    Holds its own token slot: setting a token here never touches the parent
    client's token or the durable store.
    """

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport
        self._modules = {}
        self.entities = EntitiesModule(transport)
        self.integrations = IntegrationsModule(transport)
        self.sso = self.module("sso")
        self.functions = self.module("functions")
        self.agents = self.module("agents")
        self.app_logs = self.module("appLogs")

    @property
    def token(self) -> str | None:
        return self._transport.token

    def set_token(self, token: str | None) -> None:
        self._transport.set_token(token, persist=False)

    def cleanup(self) -> None:
        """Nothing is persisted for the service role."""


class Base44Client(_DynamicFallback):
    """Client exposing entities, integrations, auth and dynamic namespaces.

    Any attribute that is not a fixed member resolves to a DynamicModule
    rooted at that name, so `client.functions.myFunction({...})` calls
    `POST functions/myFunction`.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the client.

        Args:
            config: Client configuration.
        """
        self._config = config
        self._http = create_http_client(timeout=config.timeout, transport=config.transport)
        self._transport = HttpTransport(
            server_url=config.server_url,
            http_client=self._http,
            token=config.token,
            storage=config.storage,
            storage_key=config.storage_key,
            debug=config.debug,
        )
        self._modules = {}

        self.entities = EntitiesModule(self._transport)
        self.integrations = IntegrationsModule(self._transport)
        self.auth = AuthModule(self._transport, navigate=config.navigate)
        self.app_logs = self.module("appLogs")
        self.as_service_role = ServiceRoleClient(
            self._transport.fork(config.service_token or config.token)
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def token(self) -> str | None:
        return self._transport.token

    def set_token(self, token: str | None) -> None:
        """Set the bearer token and persist it to the configured storage."""
        self._transport.set_token(token, persist=True)

    def get_config(self) -> dict[str, Any]:
        return {"server_url": self._config.server_url}

    def cleanup(self) -> None:
        """Remove the persisted token from the durable store."""
        self._transport.clear_persisted_token()

    async def call(self, name: str, payload: Any = None, **kwargs: Any) -> Any:
        """Dispatch a top-level call without attribute access.

        `client.call("customThing", {"a": 1})` issues `POST customThing`;
        with no payload it issues `GET customThing`. Same as
        `client.customThing({"a": 1})`.
        """
        return await self.module(name)(payload, **kwargs)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "Base44Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_client(config: ClientConfig | None = None, **options: Any) -> Base44Client:
    """Create a Base44Client.

    Args:
        config: A ClientConfig. Keyword options override its fields.
        **options: ClientConfig fields. With a config they override its
            fields and are validated again.

    Returns:
        A configured Base44Client.

    Raises:
        Base44ConfigError: If no server URL is supplied.
        pydantic.ValidationError: If the options fail validation.
    """
    if config is not None:
        if options:
            config = ClientConfig(**{**dict(config), **options})
        server_url = config.server_url
    else:
        server_url = options.get("server_url")

    if not server_url:
        raise Base44ConfigError("server_url is required")

    if config is None:
        config = ClientConfig(**options)
    return Base44Client(config)
