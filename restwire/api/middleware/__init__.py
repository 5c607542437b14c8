"""
API Middleware

Global exception handling for the FastAPI application.

Usage:
======
    from restwire.api.middleware import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from restwire.api.middleware.error_handler import setup_exception_handlers

__all__ = [
    "setup_exception_handlers",
]
