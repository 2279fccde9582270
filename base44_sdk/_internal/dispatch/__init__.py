"""Dynamic dispatch for Base44 namespaces.

Maps an accessed name plus call arguments to a request against a computed
path. Used for top-level client members (functions, agents, ...) and for
the two-level integrations namespace.
"""

from base44_sdk._internal.dispatch.client import (
    DynamicModule,
    IntegrationPackage,
    IntegrationsModule,
)
from base44_sdk._internal.dispatch.resolver import (
    integration_path,
    is_body_payload,
    resolve_dynamic_call,
)

__all__ = [
    "DynamicModule",
    "IntegrationPackage",
    "IntegrationsModule",
    "integration_path",
    "is_body_payload",
    "resolve_dynamic_call",
]
