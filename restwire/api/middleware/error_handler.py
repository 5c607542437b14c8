"""
Error Handler Middleware

Global exception handling for the API.

Resource routes build their own envelopes in the dispatcher. These handlers
cover everything else (unknown routes, wrong methods, unexpected failures)
so that every response from the service has the same shape:

    {"error": "Not Found", "success": false}

Exception Handling:
===================
1. RestwireException subclasses → their status_code and message
2. Starlette HTTPException (404, 405, ...) → its status_code and detail
3. Other exceptions → 500 with generic message (details logged, not exposed)

Usage:
======
    from restwire.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restwire.shared.core.exceptions import RestwireException
from restwire.shared.core.logging import logger
from restwire.shared.schemas.envelope import ResponseEnvelope


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(RestwireException)
    async def restwire_exception_handler(
        request: Request,
        exc: RestwireException,
    ) -> JSONResponse:
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_envelope(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Render routing errors (404, 405) as failure envelopes."""
        logger.info(
            "HTTP error",
            status_code=exc.status_code,
            detail=exc.detail,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseEnvelope.fail(str(exc.detail)).to_dict(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=ResponseEnvelope.fail("An unexpected error occurred").to_dict(),
        )
