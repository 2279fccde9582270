"""HTTP transport for the Base44 REST API.

Builds URLs, attaches the bearer token, performs the call and turns the
response into either a value or a Base44Error. The current token lives
here too, together with its optional durable store.
"""

import json
import sys
from collections.abc import Mapping
from typing import Any

import httpx

from base44_sdk._internal.redaction import redact_payload
from base44_sdk._internal.transport.models import (
    DEFAULT_STORAGE_KEY,
    JSON_CONTENT_TYPE,
    PROBLEM_CONTENT_TYPE,
    HttpMethod,
    RequestDescriptor,
    build_query,
    ensure_base,
)
from base44_sdk._internal.transport.storage import TokenStorage
from base44_sdk.exceptions import Base44Error


class HttpTransport:
    """Async request pipeline shared by every module of a client.

    The token slot belongs to this instance. Use `fork()` to obtain a
    transport with its own slot that reuses the same connection pool.
    """

    def __init__(
        self,
        *,
        server_url: str,
        http_client: httpx.AsyncClient,
        token: str | None = None,
        storage: TokenStorage | None = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        debug: bool = False,
    ) -> None:
        """Initialize the transport.

        Args:
            server_url: Base URL of the API; a trailing slash is added if missing.
            http_client: The httpx.AsyncClient used for every request.
            token: Explicit bearer token. Takes precedence over the store.
            storage: Optional durable store for the token.
            storage_key: Key the token is stored under.
            debug: Enable debug logging to stderr.
        """
        self._server_url = server_url
        self._base_url = ensure_base(server_url)
        self._http = http_client
        self._storage = storage
        self._storage_key = storage_key
        self._debug = debug
        self._token = token if token is not None else self._read_persisted_token()

    @property
    def server_url(self) -> str:
        return self._server_url

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[base44-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Token store
    # =========================================================================

    def _read_persisted_token(self) -> str | None:
        if self._storage is None:
            return None
        try:
            return self._storage.get_item(self._storage_key)
        except Exception as e:
            self._log_debug(f"Token read failed: {e}")
            return None

    def set_token(self, token: str | None, persist: bool = False) -> None:
        """Replace the in-memory token.

        Args:
            token: New bearer token, or None to clear it.
            persist: Also write the token to the durable store (or remove
                the key when clearing). Ignored when no store is configured.
        """
        self._token = token
        if not persist or self._storage is None:
            return
        try:
            if token:
                self._storage.set_item(self._storage_key, token)
            else:
                self._storage.remove_item(self._storage_key)
        except Exception as e:
            self._log_debug(f"Token persistence failed: {e}")

    def clear_persisted_token(self) -> None:
        """Remove the token from the durable store, leaving memory untouched."""
        if self._storage is None:
            return
        try:
            self._storage.remove_item(self._storage_key)
        except Exception as e:
            self._log_debug(f"Token removal failed: {e}")

    def fork(self, token: str | None = None) -> "HttpTransport":
        """Create a transport with an independent, non-persisting token slot.

        Args:
            token: Token for the new slot. Defaults to this transport's
                current token.

        Returns:
            A transport sharing this one's base URL and HTTP client.
        """
        return HttpTransport(
            server_url=self._server_url,
            http_client=self._http,
            token=token if token is not None else self._token,
            storage=None,
            storage_key=self._storage_key,
            debug=self._debug,
        )

    # =========================================================================
    # Requests
    # =========================================================================

    def build_url(self, path: str, query: Mapping[str, Any] | None = None) -> httpx.URL:
        """Resolve path against the base URL and append non-None query params."""
        url = httpx.URL(self._base_url).join(path)
        params = build_query(query)
        if params:
            url = url.copy_merge_params(params)
        return url

    def _build_headers(self, overrides: Mapping[str, str] | None) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": JSON_CONTENT_TYPE}
        if overrides:
            # Drop case variants so the override replaces the default
            for name, value in overrides.items():
                for existing in [k for k in headers if k.lower() == name.lower()]:
                    del headers[existing]
                headers[name] = value
        if self._token:
            for existing in [k for k in headers if k.lower() == "authorization"]:
                del headers[existing]
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def request(
        self,
        path: str,
        *,
        method: HttpMethod = "GET",
        query: Mapping[str, Any] | None = None,
        json_body: Any = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and return the unwrapped response value.

        Args:
            path: Path relative to the base URL.
            method: HTTP method.
            query: Query parameters; None values are omitted.
            json_body: JSON body, sent when not None.
            files: Multipart form fields, sent when not None.
            headers: Header overrides. The bearer token always wins over
                any Authorization header given here.

        Returns:
            None for 204 responses, the `data` member (or whole document)
            of JSON responses, and the raw text otherwise.

        Raises:
            Base44Error: On any non-2xx response.
            httpx.HTTPError: On transport failures, unchanged.
        """
        descriptor = RequestDescriptor(
            path=path,
            method=method,
            query=dict(query) if query is not None else None,
            json_body=json_body,
            files=dict(files) if files is not None else None,
            headers=dict(headers or {}),
        )
        return await self.send(descriptor)

    async def send(self, descriptor: RequestDescriptor) -> Any:
        """Send a prepared RequestDescriptor. See `request()`."""
        url = self.build_url(descriptor.path, descriptor.query)
        headers = self._build_headers(descriptor.headers)

        self._log_debug(f"{descriptor.method} {url} headers={redact_payload(headers)}")
        if descriptor.json_body is not None:
            self._log_debug(f"body={redact_payload(descriptor.json_body)}")

        response = await self._http.request(
            descriptor.method,
            url,
            headers=headers,
            json=descriptor.json_body,
            files=descriptor.files,
        )
        self._log_debug(f"{descriptor.method} {url} -> {response.status_code}")
        return parse_response(response)


def parse_response(response: httpx.Response) -> Any:
    """Classify a response into a return value or a Base44Error."""
    if response.status_code == 204:
        return None

    content_type = response.headers.get("content-type", "")
    text = response.text
    is_problem = PROBLEM_CONTENT_TYPE in content_type
    looks_json = JSON_CONTENT_TYPE in content_type or is_problem

    data: Any = text
    if looks_json:
        try:
            data = json.loads(text) if text else None
        except ValueError:
            data = text

    if not response.is_success:
        if is_problem and isinstance(data, dict):
            status = data.get("status")
            raise Base44Error(
                data.get("title") or "Request failed",
                status=status if status is not None else response.status_code,
                code=data.get("type"),
                data=data,
                kind="problem",
            )
        raise Base44Error(
            f"HTTP {response.status_code} {response.reason_phrase or ''}".strip(),
            status=response.status_code,
            data=data,
            kind="http",
        )

    if not looks_json:
        return text
    if isinstance(data, dict) and data.get("data") is not None:
        return data["data"]
    return data
