"""Shared HTTP client configuration."""

import httpx

from base44_sdk._version import __version__

# No timeout is enforced unless the caller asks for one.
DEFAULT_TIMEOUT: float | None = None


def create_http_client(
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds, or None for no timeout.
        transport: Optional transport override (e.g. httpx.MockTransport).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        transport=transport,
        headers={"User-Agent": f"base44-sdk/{__version__}"},
    )
