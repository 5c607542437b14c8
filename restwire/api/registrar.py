"""
Resource Registration

Binds a resource handler's four verb endpoints onto a router.

Routes:
=======
    handler.resource_name() == "foo", prefix "/api/v0.1"

    POST       /api/v0.1/foo        → create   (201)
    GET        /api/v0.1/foo/{id}   → read     (200)
    PUT|PATCH  /api/v0.1/foo/{id}   → update   (200)
    DELETE     /api/v0.1/foo/{id}   → delete   (200)

Route names are "create", "read", "update" and "delete", so a single route
can be looked up on the router it was registered with:

    router = APIRouter()
    register_resource_handler(router, FooHandler())
    create_route = next(r for r in router.routes if r.name == "create")
"""

import re
from typing import Optional

from fastapi import APIRouter

from restwire.api.dispatcher import ResourceDispatcher
from restwire.api.formats import FormatRegistry, format_registry
from restwire.config.settings import settings
from restwire.shared.core.logging import logger
from restwire.shared.handlers import ResourceHandler


RESOURCE_NAME_PATTERN = re.compile(r"[a-z0-9][a-z0-9_-]*")


def register_resource_handler(
    router: APIRouter,
    handler: ResourceHandler,
    prefix: Optional[str] = None,
    formats: FormatRegistry = format_registry,
) -> ResourceDispatcher:
    """
    Register CRUD routes for a resource handler.

    Args:
        router: Router the routes are added to
        handler: Resource handler; only read, never owned
        prefix: Versioned API prefix, defaults to settings.API_PREFIX
        formats: Format registry used by the endpoints

    Returns:
        The dispatcher whose endpoints were bound

    Raises:
        ValueError: resource_name() is not a lowercase URL slug
    """
    name = handler.resource_name()
    if not RESOURCE_NAME_PATTERN.fullmatch(name or ""):
        raise ValueError(f"Invalid resource name: {name!r}")

    base = (settings.API_PREFIX if prefix is None else prefix).rstrip("/")
    collection_path = f"{base}/{name}"
    item_path = f"{collection_path}/{{id}}"

    dispatcher = ResourceDispatcher(handler, name, formats)

    router.add_api_route(
        collection_path, dispatcher.create, methods=["POST"], name="create"
    )
    router.add_api_route(item_path, dispatcher.read, methods=["GET"], name="read")
    router.add_api_route(
        item_path, dispatcher.update, methods=["PUT", "PATCH"], name="update"
    )
    router.add_api_route(
        item_path, dispatcher.delete, methods=["DELETE"], name="delete"
    )

    logger.info(
        "Resource handler registered",
        resource=name,
        collection_path=collection_path,
        item_path=item_path,
    )
    return dispatcher
