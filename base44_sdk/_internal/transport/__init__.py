"""Transport layer: URL building, auth headers, response classification."""

from base44_sdk._internal.transport.client import HttpTransport, parse_response
from base44_sdk._internal.transport.models import (
    DEFAULT_STORAGE_KEY,
    RequestDescriptor,
    build_query,
    compact,
    ensure_base,
    join_path,
    quote_segment,
)
from base44_sdk._internal.transport.storage import FileStorage, MemoryStorage, TokenStorage

__all__ = [
    "HttpTransport",
    "parse_response",
    "DEFAULT_STORAGE_KEY",
    "RequestDescriptor",
    "build_query",
    "compact",
    "ensure_base",
    "join_path",
    "quote_segment",
    "FileStorage",
    "MemoryStorage",
    "TokenStorage",
]
