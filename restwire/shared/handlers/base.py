"""
Resource Handler Contract

A resource handler knows how to create, read, update and delete one kind of
domain object. Restwire never stores or inspects resources itself; it only
routes requests to a handler and wraps whatever comes back.

Contract:
=========
    resource_name()                       → "foo"  (routes: /api/v0.1/foo, /api/v0.1/foo/{id})
    create_resource(ctx, data)            → resource
    read_resource(ctx, id)                → resource
    update_resource(ctx, id, data)        → resource
    delete_resource(ctx, id)              → resource or None

Errors:
=======
A handler signals failure by raising. The dispatcher turns the exception
into a 500 envelope whose error is str(exc), unchanged.

Resources can be anything FastAPI's jsonable_encoder understands: dicts,
dataclasses, Pydantic models, lists of those.

Example:
========
    class FooHandler(ResourceHandler[Foo]):
        def resource_name(self) -> str:
            return "foo"

        async def read_resource(self, ctx, resource_id):
            foo = await repo.get(resource_id)
            if foo is None:
                raise LookupError("no resource")
            return foo
        ...
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from restwire.shared.handlers.context import RequestContext


ResourceT = TypeVar("ResourceT")


class ResourceHandler(ABC, Generic[ResourceT]):
    """
    CRUD capability for a single resource type.

    Instances are created and owned by the caller. Registration only reads
    them, calling resource_name() once.
    """

    @abstractmethod
    def resource_name(self) -> str:
        """Stable lowercase identifier used to build the resource routes."""

    @abstractmethod
    async def create_resource(
        self,
        ctx: RequestContext,
        data: dict[str, Any],
    ) -> ResourceT:
        """Create a resource from the decoded request body."""

    @abstractmethod
    async def read_resource(self, ctx: RequestContext, resource_id: str) -> ResourceT:
        """Fetch the resource with the given id."""

    @abstractmethod
    async def update_resource(
        self,
        ctx: RequestContext,
        resource_id: str,
        data: dict[str, Any],
    ) -> ResourceT:
        """Apply the decoded request body to an existing resource."""

    @abstractmethod
    async def delete_resource(
        self,
        ctx: RequestContext,
        resource_id: str,
    ) -> Optional[ResourceT]:
        """Delete the resource, returning its last representation if any."""
