"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from restwire.shared.core.logging import logger, get_logger
    from restwire.shared.core.exceptions import RestwireException

    logger.info("Resource registered", resource=name)
"""

from restwire.shared.core.logging import (
    logger,
    get_logger,
    bound_log_context,
)
from restwire.shared.core.exceptions import (
    RestwireException,
    FormatNotImplementedError,
    MalformedBodyError,
    ResourceHandlerError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "bound_log_context",
    # Exceptions
    "RestwireException",
    "FormatNotImplementedError",
    "MalformedBodyError",
    "ResourceHandlerError",
    "ResourceNotFoundError",
]
