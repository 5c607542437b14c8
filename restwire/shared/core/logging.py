"""
Logging Configuration

Structured logging setup using structlog.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Resource registered   resource=foo prefix=/api/v0.1

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Resource registered", "resource": "foo"}

Usage:
======
    from restwire.shared.core.logging import logger, get_logger, bound_log_context

    logger.info("Resource registered", resource=name)

    # Request-scoped values for every log call inside the block
    with bound_log_context(request_id=ctx.request_id, resource=name):
        logger.info("Dispatching")  # Includes request_id and resource
"""

import logging
import sys
from typing import Any, ContextManager

import structlog
from structlog.typing import Processor

from restwire.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Development gets colored console output; every other environment
    renders JSON lines for log aggregation.

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bound_log_context(**kwargs: Any) -> ContextManager[None]:
    """
    Bind context variables for the duration of a with-block.

    On exit the previous values are restored, so anything an outer layer
    bound survives.

    Args:
        **kwargs: Key-value pairs to add to log context

    Example:
        with bound_log_context(request_id=request_id, resource="foo"):
            logger.info("Dispatching")  # Includes request_id and resource
    """
    return structlog.contextvars.bound_contextvars(**kwargs)


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("restwire")
