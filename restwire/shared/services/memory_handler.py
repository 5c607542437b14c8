"""
In-Memory Resource Handler

Dict-backed ResourceHandler used by the default application and for local
experimentation. Resources are plain dicts with a generated string "id".

Usage:
======
    from restwire.shared.services.memory_handler import InMemoryResourceHandler

    app = create_application([InMemoryResourceHandler("notes")])
    # POST /api/v0.1/notes {"title": "hi"} → {"result": {"id": "...", "title": "hi"}, ...}
"""

import asyncio
from typing import Any, Optional
from uuid import uuid4

from restwire.shared.core.exceptions import ResourceNotFoundError
from restwire.shared.handlers import RequestContext, ResourceHandler


class InMemoryResourceHandler(ResourceHandler[dict[str, Any]]):
    """
    Stores resources in a process-local dict.

    Unknown ids raise ResourceNotFoundError, which the dispatcher reports
    as a 500 envelope carrying the message.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._items: dict[str, dict[str, Any]] = {}
        self._lock = asyncio.Lock()

    def resource_name(self) -> str:
        return self._name

    def _missing(self, resource_id: str) -> ResourceNotFoundError:
        return ResourceNotFoundError(self._name, resource_id)

    async def create_resource(
        self,
        ctx: RequestContext,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        resource_id = uuid4().hex
        resource = {**data, "id": resource_id}
        async with self._lock:
            self._items[resource_id] = resource
        return dict(resource)

    async def read_resource(self, ctx: RequestContext, resource_id: str) -> dict[str, Any]:
        async with self._lock:
            resource = self._items.get(resource_id)
        if resource is None:
            raise self._missing(resource_id)
        return dict(resource)

    async def update_resource(
        self,
        ctx: RequestContext,
        resource_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        async with self._lock:
            if resource_id not in self._items:
                raise self._missing(resource_id)
            # The id is owned by the store, not the client
            resource = {**self._items[resource_id], **data, "id": resource_id}
            self._items[resource_id] = resource
        return dict(resource)

    async def delete_resource(
        self,
        ctx: RequestContext,
        resource_id: str,
    ) -> Optional[dict[str, Any]]:
        async with self._lock:
            resource = self._items.pop(resource_id, None)
        if resource is None:
            raise self._missing(resource_id)
        return resource
