"""
Restwire API Application Entry Point

FastAPI application setup with resource routes, middleware, and lifecycle
logging.

Application Layout:
===================
    CORS middleware
         │
    Exception handlers (envelope-shaped errors for non-resource routes)
         │
    Routers
      ├── Health   (/health, /ready, /live)
      └── One per resource handler (/api/v0.1/<resource>[/{id}])

Usage:
======
    # Run the bundled in-memory example
    uvicorn restwire.api.main:app --reload

    # Or expose your own handlers
    from restwire.api.main import create_application
    app = create_application([FooHandler()])
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restwire.api.middleware import setup_exception_handlers
from restwire.api.routes import register_routes
from restwire.config.settings import settings
from restwire.shared.core.logging import logger
from restwire.shared.handlers import ResourceHandler
from restwire.shared.services import InMemoryResourceHandler


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the application."""
    logger.info(
        "Starting Restwire API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        resources=getattr(app.state, "resources", []),
    )

    yield

    logger.info("Restwire API shutdown complete")


def create_application(
    handlers: Optional[Iterable[ResourceHandler]] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        handlers: Resource handlers to expose, registered in order

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Generic REST resource handler routing",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app, handlers or [])

    return app


# Application instance serving the in-memory example resource
app = create_application([InMemoryResourceHandler("items")])
