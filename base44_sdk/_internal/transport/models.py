"""Request models and URL helpers for the Base44 transport."""

import json
from collections.abc import Mapping
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, Field

# =============================================================================
# Constants
# =============================================================================

DEFAULT_STORAGE_KEY = "__b44_token__"

JSON_CONTENT_TYPE = "application/json"
PROBLEM_CONTENT_TYPE = "application/problem+json"

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# =============================================================================
# Request Descriptor
# =============================================================================


class RequestDescriptor(BaseModel):
    """One outgoing request, built per call and never retained.

    Required fields:
        path: Path relative to the client's base URL

    Optional fields:
        method: HTTP method (default: GET)
        query: Query parameters; None values are dropped when encoding
        json_body: JSON-encodable body
        files: Multipart form fields, as accepted by httpx
        headers: Header overrides
    """

    path: str
    method: HttpMethod = "GET"
    query: dict[str, Any] | None = None
    json_body: Any = None
    files: dict[str, Any] | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = {"arbitrary_types_allowed": True}


# =============================================================================
# Helpers
# =============================================================================


def ensure_base(url: str) -> str:
    """Normalize a base URL so relative paths resolve beneath it."""
    return url if url.endswith("/") else url + "/"


def quote_segment(value: Any) -> str:
    """Percent-encode a single path segment, slashes included."""
    return quote(str(value), safe="")


def join_path(*segments: Any) -> str:
    """Join percent-encoded segments into a relative path."""
    return "/".join(quote_segment(segment) for segment in segments)


def encode_query_value(value: Any) -> str:
    """Render a query value the way the platform expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(encode_query_value(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def build_query(query: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Encode a query mapping, dropping None values and keeping order."""
    if not query:
        return []
    return [(str(key), encode_query_value(value)) for key, value in query.items() if value is not None]


def compact(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of mapping without None values."""
    return {key: value for key, value in mapping.items() if value is not None}
