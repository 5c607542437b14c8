"""
Request Context

Per-request value handed to every resource handler call. It carries the
underlying request, its path parameters and any request-scoped values the
hosting layer wants to pass along. The dispatcher never reads it back.
"""

from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

from fastapi import Request


@dataclass
class RequestContext:
    """Opaque per-request context."""

    request: Optional[Request] = None
    path_params: dict[str, str] = field(default_factory=dict)
    request_id: str = field(default_factory=lambda: uuid4().hex)
    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Request) -> "RequestContext":
        # An upstream proxy's id wins so log lines can be correlated.
        request_id = request.headers.get("x-request-id") or uuid4().hex
        return cls(
            request=request,
            path_params=dict(request.path_params),
            request_id=request_id,
        )

    def value(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def with_value(self, key: str, value: Any) -> "RequestContext":
        """Return a copy of the context with one more request-scoped value."""
        return RequestContext(
            request=self.request,
            path_params=dict(self.path_params),
            request_id=self.request_id,
            values={**self.values, key: value},
        )
