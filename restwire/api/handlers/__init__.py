"""
API Handlers

Route handlers for the service's own endpoints. Resource routes are not
declared here; they are generated per resource handler by
restwire.api.registrar.
"""

from restwire.api.handlers import health_handler

__all__ = [
    "health_handler",
]
