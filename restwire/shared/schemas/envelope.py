"""
Response Envelope

Every resource endpoint answers with the same wrapper:

    {"result": {...}, "success": true}      ← handler succeeded
    {"error": "no resource", "success": false}  ← anything failed

Exactly one of result/error is present. A successful call whose handler
returned None renders as {"success": true}.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ResponseEnvelope(BaseModel):
    """Uniform success/error wrapper around every resource response."""

    success: bool
    result: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, result: Any = None) -> "ResponseEnvelope":
        return cls(success=True, result=result)

    @classmethod
    def fail(cls, message: str) -> "ResponseEnvelope":
        return cls(success=False, error=message)

    def to_dict(self) -> dict[str, Any]:
        """
        Build the wire mapping, omitting whichever of result/error is unset.

        The resource itself is passed through untouched; the response format
        is responsible for turning it into plain JSON types.
        """
        payload: dict[str, Any] = {}
        if not self.success:
            payload["error"] = self.error or ""
        elif self.result is not None:
            payload["result"] = self.result
        payload["success"] = self.success
        return payload
