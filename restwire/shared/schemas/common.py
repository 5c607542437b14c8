"""
Common Schemas

Shared schemas for the service's own endpoints.

Usage:
======
    from restwire.shared.schemas.common import HealthResponse

    return HealthResponse(service="restwire", version="0.1.0")
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "restwire"
    version: str = "0.1.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ReadinessResponse(BaseModel):
    """Readiness response listing the resources served by this instance."""

    status: str = "ready"
    resources: list[str] = Field(default_factory=list)
