"""Mapping of dynamic endpoint names to request descriptors."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from base44_sdk._internal.transport.models import JSON_CONTENT_TYPE, RequestDescriptor, join_path


def is_body_payload(value: Any) -> bool:
    """Decide whether a dynamic call's argument is a POST body.

    A non-empty mapping or a pydantic model is a body. Anything else,
    including an empty mapping, is treated as GET query parameters.
    A mapping whose values are all None still counts as a body.
    """
    if isinstance(value, BaseModel):
        return True
    return isinstance(value, Mapping) and len(value) > 0


def resolve_dynamic_call(base_path: str, name: str | None, payload: Any = None) -> RequestDescriptor:
    """Build the request for calling `name` under `base_path`.

    Args:
        base_path: Namespace segment, e.g. "functions".
        name: Endpoint name, or None to call the namespace itself.
        payload: Body mapping/model for a POST, or query mapping for a GET.

    Returns:
        The RequestDescriptor for the call. Both segments are percent-encoded.

    Raises:
        TypeError: If payload is neither None, a mapping nor a pydantic model.
    """
    path = join_path(base_path, name) if name is not None else join_path(base_path)
    label = f"{base_path}.{name}" if name is not None else base_path

    if is_body_payload(payload):
        body = payload.model_dump(mode="json") if isinstance(payload, BaseModel) else dict(payload)
        return RequestDescriptor(
            path=path,
            method="POST",
            json_body=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    if payload is not None and not isinstance(payload, Mapping):
        raise TypeError(
            f"{label}() expects a mapping or a pydantic model, got {type(payload).__name__}"
        )

    return RequestDescriptor(path=path, method="GET", query=dict(payload) if payload else None)


def integration_path(package: str, action: str) -> str:
    """Path of an integration action endpoint."""
    return f"integrations/{join_path(package, action)}"
