"""Entities module: CRUD over `entities/{type}` endpoints."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import IO, Any

from base44_sdk._internal.transport.client import HttpTransport
from base44_sdk._internal.transport.models import JSON_CONTENT_TYPE, compact, join_path
from base44_sdk.models import Entity

# Accepted by httpx for a multipart field: raw content, a file object,
# or a (filename, content[, content_type]) tuple.
UploadFile = bytes | str | IO[bytes] | tuple[Any, ...]

_JSON_HEADERS = {"Content-Type": JSON_CONTENT_TYPE}


def _fields_param(fields: Sequence[str] | str | None) -> str | None:
    if not fields:
        return None
    if isinstance(fields, str):
        return fields
    return ",".join(fields)


class EntityHandler:
    """Operations on one entity type, e.g. `client.entities.Todo`."""

    def __init__(self, entity_type: str, transport: HttpTransport) -> None:
        self._entity_type = entity_type
        self._transport = transport

    @property
    def entity_type(self) -> str:
        return self._entity_type

    def _path(self, *segments: Any) -> str:
        return "entities/" + join_path(self._entity_type, *segments)

    async def list(
        self,
        sort: str | None = None,
        limit: int | None = None,
        skip: int | None = None,
        fields: Sequence[str] | str | None = None,
    ) -> list[Entity]:
        """List records.

        Args:
            sort: Sort field, prefixed with "-" for descending order.
            limit: Maximum number of records.
            skip: Number of records to skip.
            fields: Fields to return (list or comma-separated string).
        """
        query = compact({"sort": sort, "limit": limit, "skip": skip, "fields": _fields_param(fields)})
        return await self._transport.request(self._path(), method="GET", query=query)

    async def filter(
        self,
        query: Mapping[str, Any] | None = None,
        *,
        sort: str | None = None,
        limit: int | None = None,
        skip: int | None = None,
        fields: Sequence[str] | str | None = None,
    ) -> list[Entity]:
        """List records matching `query`, sent as JSON in the `q` parameter."""
        params = compact({
            "q": json.dumps(dict(query or {}), separators=(",", ":")),
            "sort": sort,
            "limit": limit,
            "skip": skip,
            "fields": _fields_param(fields),
        })
        return await self._transport.request(self._path(), method="GET", query=params)

    async def get(self, entity_id: str) -> Entity:
        return await self._transport.request(self._path(entity_id), method="GET")

    async def create(self, record: Mapping[str, Any]) -> Entity:
        return await self._transport.request(
            self._path(), method="POST", json_body=dict(record), headers=_JSON_HEADERS
        )

    async def update(self, entity_id: str, record: Mapping[str, Any]) -> Entity:
        """Update a record; `record` may be partial."""
        return await self._transport.request(
            self._path(entity_id), method="PUT", json_body=dict(record), headers=_JSON_HEADERS
        )

    async def delete(self, entity_id: str) -> Any:
        return await self._transport.request(self._path(entity_id), method="DELETE")

    async def delete_many(self, query: Mapping[str, Any]) -> Any:
        """Delete every record matching `query`."""
        return await self._transport.request(
            self._path("deleteMany"),
            method="POST",
            json_body={"query": dict(query)},
            headers=_JSON_HEADERS,
        )

    async def bulk_create(self, records: Iterable[Mapping[str, Any]]) -> list[Entity]:
        return await self._transport.request(
            self._path("bulk"),
            method="POST",
            json_body={"data": [dict(record) for record in records]},
            headers=_JSON_HEADERS,
        )

    async def import_entities(self, file: UploadFile) -> Any:
        """Upload a file (e.g. CSV) of records as multipart field `file`."""
        return await self._transport.request(self._path("import"), method="POST", files={"file": file})

    def __repr__(self) -> str:
        return f"EntityHandler({self._entity_type!r})"


class EntitiesModule:
    """Namespace of entity types: `entities.Todo` or `entities["Todo"]`."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport
        self._handlers: dict[str, EntityHandler] = {}

    def entity(self, entity_type: str) -> EntityHandler:
        """Return the memoized handler for `entity_type`."""
        handler = self._handlers.get(entity_type)
        if handler is None:
            handler = EntityHandler(entity_type, self._transport)
            self._handlers[entity_type] = handler
        return handler

    def __getattr__(self, name: str) -> EntityHandler:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.entity(name)

    def __getitem__(self, name: str) -> EntityHandler:
        return self.entity(name)
