"""In-memory resource handler — id assignment, merge on update, missing ids."""

import pytest

from restwire.shared.core.exceptions import ResourceNotFoundError
from restwire.shared.handlers import RequestContext
from restwire.shared.services import InMemoryResourceHandler


@pytest.fixture
def handler() -> InMemoryResourceHandler:
    return InMemoryResourceHandler("notes")


@pytest.fixture
def ctx() -> RequestContext:
    return RequestContext()


async def test_create_assigns_id(handler, ctx):
    note = await handler.create_resource(ctx, {"title": "hi"})

    assert note["title"] == "hi"
    assert note["id"]
    assert await handler.read_resource(ctx, note["id"]) == note


async def test_create_ignores_client_id(handler, ctx):
    note = await handler.create_resource(ctx, {"id": "mine", "title": "hi"})

    assert note["id"] != "mine"


async def test_update_merges_fields_and_keeps_id(handler, ctx):
    note = await handler.create_resource(ctx, {"title": "hi", "body": "x"})

    updated = await handler.update_resource(ctx, note["id"], {"title": "yo", "id": "z"})

    assert updated == {"id": note["id"], "title": "yo", "body": "x"}


async def test_delete_returns_removed_resource(handler, ctx):
    note = await handler.create_resource(ctx, {"title": "hi"})

    assert await handler.delete_resource(ctx, note["id"]) == note
    with pytest.raises(ResourceNotFoundError, match="not found"):
        await handler.read_resource(ctx, note["id"])


@pytest.mark.parametrize("method", ["read_resource", "delete_resource"])
async def test_missing_id_raises_lookup_error(handler, ctx, method):
    with pytest.raises(ResourceNotFoundError, match="notes with id 'nope' not found"):
        await getattr(handler, method)(ctx, "nope")


async def test_update_missing_id_raises_lookup_error(handler, ctx):
    with pytest.raises(ResourceNotFoundError):
        await handler.update_resource(ctx, "nope", {"title": "yo"})


def test_context_with_value_copies():
    ctx = RequestContext(request_id="r1")

    derived = ctx.with_value("user", "u1")

    assert derived.value("user") == "u1"
    assert ctx.value("user") is None
    assert derived.request_id == "r1"


async def test_not_found_error_is_a_lookup_error(handler, ctx):
    with pytest.raises(LookupError) as exc_info:
        await handler.read_resource(ctx, "nope")

    assert isinstance(exc_info.value, ResourceNotFoundError)
    assert exc_info.value.resource == "notes"
    assert exc_info.value.resource_id == "nope"
