"""Base44 SDK for Python.

Async client for the Base44 platform REST API.

Public API:
    create_client - Build a Base44Client from a config or keyword options
    Base44Client - Entities, integrations, auth and dynamic namespaces
    ClientConfig - Client configuration
    Base44Error - Error raised for failed requests

Internal (not for direct use):
    _internal.transport - Request pipeline and token store
    _internal.dispatch - Dynamic name-to-endpoint dispatch
"""

from base44_sdk._internal.transport.storage import FileStorage, MemoryStorage, TokenStorage
from base44_sdk._version import __version__
from base44_sdk.client import Base44Client, ServiceRoleClient, create_client
from base44_sdk.exceptions import Base44ConfigError, Base44Error
from base44_sdk.models import ClientConfig, Entity

__all__ = [
    "__version__",
    "Base44Client",
    "Base44ConfigError",
    "Base44Error",
    "ClientConfig",
    "Entity",
    "FileStorage",
    "MemoryStorage",
    "ServiceRoleClient",
    "TokenStorage",
    "create_client",
]
