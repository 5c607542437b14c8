"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live      → Health check endpoints
    /api/v0.1/<resource>        → One CRUD route set per resource handler

Usage:
======
    from restwire.api.routes import register_routes

    app = FastAPI()
    register_routes(app, [FooHandler(), BarHandler()])
"""

from typing import Iterable

from fastapi import APIRouter, FastAPI

from restwire.api.handlers import health_handler
from restwire.api.registrar import register_resource_handler
from restwire.shared.handlers import ResourceHandler


def register_routes(app: FastAPI, handlers: Iterable[ResourceHandler] = ()) -> None:
    """
    Register all API routes.

    Each resource handler gets its own router so route names
    ("create", "read", ...) stay unique within it.

    Args:
        app: FastAPI application instance
        handlers: Resource handlers to expose
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    resources: list[str] = []
    for handler in handlers:
        router = APIRouter()
        dispatcher = register_resource_handler(router, handler)
        app.include_router(router, tags=[dispatcher.resource])
        resources.append(dispatcher.resource)

    app.state.resources = resources
