"""
Resource Dispatcher

Turns HTTP requests into resource handler calls and handler results into
response envelopes.

Request Pipeline:
=================
    request
       │
       ▼
    resolve ?format=          ──── unknown ──────▶ 501 {"error": "Format not implemented: x", ...}
       │
       ▼
    decode body (create/update) ── malformed ───▶ 500 {"error": "<decode message>", ...}
       │
       ▼
    handler call              ──── raises ───────▶ 500 {"error": "<str(exc)>", ...}
       │
       ▼
    201 / 200 {"result": ..., "success": true}

Every path ends in exactly one write_envelope() call. Endpoints hold no
per-request state; the handler and format registry are only read.
"""

from typing import Any, Awaitable, Callable, Optional

from fastapi import Request
from fastapi.responses import Response

from restwire.api.formats import FormatRegistry, ResponseFormat, format_registry
from restwire.shared.core.exceptions import (
    MalformedBodyError,
    ResourceHandlerError,
    RestwireException,
)
from restwire.shared.core.logging import bound_log_context, get_logger
from restwire.shared.handlers import RequestContext, ResourceHandler
from restwire.shared.schemas.envelope import ResponseEnvelope


logger = get_logger("restwire.dispatcher")

# (request, resolved format, context) → resource
Action = Callable[[Request, ResponseFormat, RequestContext], Awaitable[Any]]


async def decode_body(request: Request, fmt: ResponseFormat) -> dict[str, Any]:
    """
    Decode the request body into a string-keyed mapping.

    Raises:
        MalformedBodyError: body does not parse, or is not an object
    """
    body = await request.body()
    try:
        data = fmt.decode(body)
    except ValueError as exc:
        raise MalformedBodyError(str(exc)) from exc
    if not isinstance(data, dict):
        raise MalformedBodyError("Request body must be a JSON object")
    return data


def write_envelope(
    status_code: int,
    envelope: ResponseEnvelope,
    fmt: ResponseFormat,
) -> Response:
    """
    Encode an envelope in the resolved format.

    A resource the format cannot serialize becomes a 500 failure envelope,
    so the caller always gets a well-formed body.
    """
    try:
        body = fmt.encode(envelope.to_dict())
    except (TypeError, ValueError) as exc:
        logger.error(
            "Envelope encoding failed",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        status_code = 500
        body = fmt.encode(ResponseEnvelope.fail(str(exc)).to_dict())
    return Response(content=body, status_code=status_code, media_type=fmt.media_type)


def _first_query_value(request: Request, key: str) -> Optional[str]:
    # ?format=a&format=b resolves to "a"
    values = request.query_params.getlist(key)
    return values[0] if values else None


async def _call_handler(action: str, call: Callable[[], Awaitable[Any]]) -> Any:
    try:
        return await call()
    except Exception as exc:
        raise ResourceHandlerError(action, exc) from exc


class ResourceDispatcher:
    """
    Verb endpoints for one resource handler.

    Each public coroutine (create, read, update, delete) is a Starlette-style
    endpoint taking the raw Request, so FastAPI does no body parsing or
    validation of its own.

    Attributes:
        handler: The resource handler calls are delegated to
        resource: Resource name read once at registration
        formats: Format registry consulted for ?format=
    """

    def __init__(
        self,
        handler: ResourceHandler,
        resource: str,
        formats: FormatRegistry = format_registry,
    ) -> None:
        self.handler = handler
        self.resource = resource
        self.formats = formats

    async def _dispatch(
        self,
        request: Request,
        action: str,
        success_status: int,
        run: Action,
    ) -> Response:
        ctx = RequestContext.from_request(request)
        with bound_log_context(
            request_id=ctx.request_id, resource=self.resource, action=action
        ):
            # Errors raised before resolution still need an encoder
            fmt = self.formats.default
            try:
                fmt = self.formats.resolve(_first_query_value(request, "format"))
                result = await run(request, fmt, ctx)
            except RestwireException as exc:
                logger.warning(
                    "Resource request failed",
                    error_code=exc.error_code,
                    message=exc.message,
                    status_code=exc.status_code,
                    path=request.url.path,
                )
                status_code, envelope = exc.status_code, ResponseEnvelope.fail(exc.message)
            else:
                logger.debug("Resource request handled", status_code=success_status)
                status_code, envelope = success_status, ResponseEnvelope.ok(result)
            return write_envelope(status_code, envelope, fmt)

    # ═══════════════════════════════════════════════════════════════════════════
    # VERB ENDPOINTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, request: Request) -> Response:
        """POST <prefix>/<resource> → 201 with the created resource."""

        async def run(request: Request, fmt: ResponseFormat, ctx: RequestContext) -> Any:
            data = await decode_body(request, fmt)
            return await _call_handler(
                "create", lambda: self.handler.create_resource(ctx, data)
            )

        return await self._dispatch(request, "create", 201, run)

    async def read(self, request: Request) -> Response:
        """GET <prefix>/<resource>/{id} → 200 with the resource."""

        async def run(request: Request, fmt: ResponseFormat, ctx: RequestContext) -> Any:
            resource_id = request.path_params["id"]
            return await _call_handler(
                "read", lambda: self.handler.read_resource(ctx, resource_id)
            )

        return await self._dispatch(request, "read", 200, run)

    async def update(self, request: Request) -> Response:
        """PUT/PATCH <prefix>/<resource>/{id} → 200 with the updated resource."""

        async def run(request: Request, fmt: ResponseFormat, ctx: RequestContext) -> Any:
            resource_id = request.path_params["id"]
            data = await decode_body(request, fmt)
            return await _call_handler(
                "update", lambda: self.handler.update_resource(ctx, resource_id, data)
            )

        return await self._dispatch(request, "update", 200, run)

    async def delete(self, request: Request) -> Response:
        """DELETE <prefix>/<resource>/{id} → 200 with the deleted resource, if any."""

        async def run(request: Request, fmt: ResponseFormat, ctx: RequestContext) -> Any:
            resource_id = request.path_params["id"]
            return await _call_handler(
                "delete", lambda: self.handler.delete_resource(ctx, resource_id)
            )

        return await self._dispatch(request, "delete", 200, run)
