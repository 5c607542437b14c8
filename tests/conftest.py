"""Root conftest — shared test configuration."""

import os

# JSON log rendering, no colors, before restwire reads its settings
os.environ.setdefault("APP_ENV", "test")

from dataclasses import dataclass
from typing import Any, Optional

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from restwire.api.registrar import register_resource_handler
from restwire.shared.handlers import RequestContext, ResourceHandler


@dataclass
class Resource:
    foo: str


class StubResourceHandler(ResourceHandler[Resource]):
    """
    Recording stub with a configurable answer per method.

    Configure with on(method, result=..., error=...). Calling a method that
    was not configured fails loudly.
    """

    def __init__(self, name: str = "foo") -> None:
        self.name = name
        self.answers: dict[str, tuple[Any, Optional[Exception]]] = {}
        self.calls: list[tuple[str, tuple]] = []

    def on(
        self,
        method: str,
        result: Any = None,
        error: Optional[Exception] = None,
    ) -> "StubResourceHandler":
        self.answers[method] = (result, error)
        return self

    def calls_to(self, method: str) -> list[tuple]:
        return [args for name, args in self.calls if name == method]

    def _answer(self, method: str, *args: Any) -> Any:
        self.calls.append((method, args))
        if method not in self.answers:
            raise AssertionError(f"Unexpected call: {method}")
        result, error = self.answers[method]
        if error is not None:
            raise error
        return result

    def resource_name(self) -> str:
        self.calls.append(("resource_name", ()))
        return self.name

    async def create_resource(self, ctx: RequestContext, data: dict[str, Any]) -> Resource:
        return self._answer("create_resource", ctx, data)

    async def read_resource(self, ctx: RequestContext, resource_id: str) -> Resource:
        return self._answer("read_resource", ctx, resource_id)

    async def update_resource(
        self, ctx: RequestContext, resource_id: str, data: dict[str, Any]
    ) -> Resource:
        return self._answer("update_resource", ctx, resource_id, data)

    async def delete_resource(
        self, ctx: RequestContext, resource_id: str
    ) -> Optional[Resource]:
        return self._answer("delete_resource", ctx, resource_id)


@pytest.fixture
def stub_handler() -> StubResourceHandler:
    return StubResourceHandler("foo")


@pytest.fixture
def router(stub_handler) -> APIRouter:
    router = APIRouter()
    register_resource_handler(router, stub_handler)
    return router


@pytest.fixture
def client(router) -> TestClient:
    """Client over a bare app holding only the registered resource routes."""
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)
