"""Dynamic modules exposing open-ended sets of named endpoints.

The backend serves custom functions, agents and integration actions whose
names are not known ahead of time. These modules bind a name to a request
on first access and memoize the resulting callable per name.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from base44_sdk._internal.dispatch.resolver import integration_path, resolve_dynamic_call
from base44_sdk._internal.transport.client import HttpTransport
from base44_sdk._internal.transport.models import JSON_CONTENT_TYPE

DynamicCallable = Callable[..., Awaitable[Any]]


def _merge_payload(payload: Any, kwargs: dict[str, Any]) -> Any:
    if kwargs:
        if payload is not None:
            raise TypeError("Pass the payload either positionally or as keyword arguments, not both")
        return kwargs
    return payload


class DynamicModule:
    """Single-level namespace: `module.name(payload)` -> `<base_path>/name`.

    A non-empty mapping payload is POSTed as JSON; no payload or an empty
    mapping issues a GET with the mapping as query parameters. Calling the
    module itself targets `<base_path>`.
    """

    def __init__(self, base_path: str, transport: HttpTransport) -> None:
        self._base_path = base_path
        self._transport = transport
        self._methods: dict[str, DynamicCallable] = {}

    @property
    def base_path(self) -> str:
        return self._base_path

    async def call(self, name: str, payload: Any = None, **kwargs: Any) -> Any:
        """Invoke the endpoint `name` in this namespace.

        Args:
            name: Endpoint name.
            payload: Body or query mapping.
            **kwargs: Used as the payload when none is given positionally.

        Returns:
            The unwrapped response value.
        """
        descriptor = resolve_dynamic_call(self._base_path, name, _merge_payload(payload, kwargs))
        return await self._transport.send(descriptor)

    async def __call__(self, payload: Any = None, **kwargs: Any) -> Any:
        descriptor = resolve_dynamic_call(self._base_path, None, _merge_payload(payload, kwargs))
        return await self._transport.send(descriptor)

    def method(self, name: str) -> DynamicCallable:
        """Return the memoized callable bound to `name`."""
        bound = self._methods.get(name)
        if bound is None:

            async def bound(payload: Any = None, **kwargs: Any) -> Any:
                return await self.call(name, payload, **kwargs)

            bound.__name__ = name
            bound.__qualname__ = f"{self._base_path}.{name}"
            self._methods[name] = bound
        return bound

    def __getattr__(self, name: str) -> DynamicCallable:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.method(name)

    def __repr__(self) -> str:
        return f"DynamicModule({self._base_path!r})"


class IntegrationPackage:
    """Second level of the integrations namespace: one package's actions."""

    def __init__(self, name: str, transport: HttpTransport) -> None:
        self._name = name
        self._transport = transport
        self._actions: dict[str, DynamicCallable] = {}

    @property
    def name(self) -> str:
        return self._name

    async def call(self, action: str, data: Any = None, **kwargs: Any) -> Any:
        """POST `data` (default `{}`) to `integrations/<package>/<action>`."""
        body = _merge_payload(data, kwargs)
        return await self._transport.request(
            integration_path(self._name, action),
            method="POST",
            json_body=body if body is not None else {},
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    def action(self, name: str) -> DynamicCallable:
        """Return the memoized callable for action `name`."""
        bound = self._actions.get(name)
        if bound is None:

            async def bound(data: Any = None, **kwargs: Any) -> Any:
                return await self.call(name, data, **kwargs)

            bound.__name__ = name
            bound.__qualname__ = f"integrations.{self._name}.{name}"
            self._actions[name] = bound
        return bound

    def __getattr__(self, name: str) -> DynamicCallable:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.action(name)

    def __repr__(self) -> str:
        return f"IntegrationPackage({self._name!r})"


class IntegrationsModule:
    """Two-level namespace: `integrations.<package>.<action>(data)`."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport
        self._packages: dict[str, IntegrationPackage] = {}

    def package(self, name: str) -> IntegrationPackage:
        """Return the memoized package namespace `name`."""
        pkg = self._packages.get(name)
        if pkg is None:
            pkg = IntegrationPackage(name, self._transport)
            self._packages[name] = pkg
        return pkg

    async def call(self, package: str, action: str, data: Any = None, **kwargs: Any) -> Any:
        """Invoke an integration action without attribute access."""
        return await self.package(package).call(action, data, **kwargs)

    def __getattr__(self, name: str) -> IntegrationPackage:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.package(name)

    def __getitem__(self, name: str) -> IntegrationPackage:
        return self.package(name)
