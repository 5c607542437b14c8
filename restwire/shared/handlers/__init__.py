"""
Resource Handlers

The contract pluggable resource handlers implement, and the context passed
to each of their calls.

Usage:
======
    from restwire.shared.handlers import ResourceHandler, RequestContext
"""

from restwire.shared.handlers.base import ResourceHandler
from restwire.shared.handlers.context import RequestContext

__all__ = [
    "ResourceHandler",
    "RequestContext",
]
