"""
Custom Exceptions

Application-specific exceptions carrying the HTTP status code that the
dispatcher writes alongside the error envelope.

Exception Hierarchy:
====================
    RestwireException (base, 500)
       │
       ├── FormatNotImplementedError (501)  ← ?format= names an unknown format
       ├── MalformedBodyError (500)         ← Request body is not a JSON object
       └── ResourceHandlerError (500)       ← Handler call raised

    ResourceNotFoundError (LookupError)     ← Raised by resource handlers;
                                              wrapped like any handler error

Usage:
======
    from restwire.shared.core.exceptions import FormatNotImplementedError

    raise FormatNotImplementedError("xml")
    # Envelope: {"error": "Format not implemented: xml", "success": false}

Messages are sent to the client verbatim. Nothing is redacted or wrapped:
the text a resource handler raises with is exactly what the caller sees.
"""

from typing import Any, Optional


class RestwireException(Exception):
    """
    Base exception for all Restwire errors.

    Attributes:
        message: Human-readable error message, rendered as the envelope error
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code, used in logs
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        super().__init__(self.message)

    def to_envelope(self) -> dict[str, Any]:
        """
        Convert exception to the failure envelope.

        Returns:
            Dictionary with success flag and error message
        """
        return {"error": self.message, "success": False}


# ═══════════════════════════════════════════════════════════════════════════════
# DISPATCH ERRORS (501, 500)
# ═══════════════════════════════════════════════════════════════════════════════


class FormatNotImplementedError(RestwireException):
    """
    Unsupported response format (501 Not Implemented).

    Raised when the ?format= query parameter names a format that is not
    in the format registry.
    """

    def __init__(self, format_name: str) -> None:
        self.format_name = format_name
        super().__init__(
            message=f"Format not implemented: {format_name}",
            status_code=501,
            error_code="FORMAT_NOT_IMPLEMENTED",
        )


class MalformedBodyError(RestwireException):
    """
    Request body could not be decoded into a mapping (500).

    The message is the decoder's own error text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="MALFORMED_BODY",
        )


class ResourceHandlerError(RestwireException):
    """
    A resource handler call failed (500).

    Wraps whatever the handler raised; the message is str() of the original.
    """

    def __init__(self, action: str, cause: BaseException) -> None:
        self.action = action
        self.cause = cause
        super().__init__(
            message=str(cause),
            status_code=500,
            error_code="HANDLER_ERROR",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# HANDLER-SIDE ERRORS
# ═══════════════════════════════════════════════════════════════════════════════


class ResourceNotFoundError(LookupError):
    """
    No resource with the requested id.

    Raised by resource handlers, not by the dispatcher. Like any handler
    failure it reaches the client as a 500 envelope carrying its message.

    Example:
        raise ResourceNotFoundError("notes", "abc-123")
        # Message: "notes with id 'abc-123' not found"
    """

    def __init__(self, resource: str, resource_id: Optional[str] = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)
