"""
Pydantic Schemas

Response models for the API.

Schema Categories:
==================
- envelope: The {success, result|error} wrapper for resource routes
- common: Health responses

Usage:
======
    from restwire.shared.schemas.envelope import ResponseEnvelope
    from restwire.shared.schemas.common import HealthResponse
"""

from restwire.shared.schemas.common import (
    HealthResponse,
    ReadinessResponse,
)
from restwire.shared.schemas.envelope import ResponseEnvelope

__all__ = [
    "HealthResponse",
    "ReadinessResponse",
    "ResponseEnvelope",
]
