"""Shared pytest fixtures for fastapi-migrations-endpoint tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import urlencode

import pytest
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from fastapi_migrations_endpoint.middleware import MigrationsEndpointMiddleware
from fastapi_migrations_endpoint.options import MigrationsEndpointOptions
from fastapi_migrations_endpoint.registry import SchemaContextRegistry

LOGGER_NAME = "tests.migrations_endpoint"


@dataclass
class ASGIResult:
    """Messages captured from one ASGI call."""

    messages: list[dict[str, Any]] = field(default_factory=list)

    @property
    def started(self) -> bool:
        return any(m["type"] == "http.response.start" for m in self.messages)

    @property
    def status(self) -> int:
        start = next(m for m in self.messages if m["type"] == "http.response.start")
        return int(start["status"])

    @property
    def headers(self) -> dict[str, str]:
        start = next(m for m in self.messages if m["type"] == "http.response.start")
        return {k.decode().lower(): v.decode() for k, v in start["headers"]}

    @property
    def body(self) -> str:
        return b"".join(
            m.get("body", b"") for m in self.messages if m["type"] == "http.response.body"
        ).decode()


class Downstream:
    """Next app in the chain; records whether it was reached."""

    def __init__(self) -> None:
        self.calls = 0

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        self.calls += 1
        await PlainTextResponse("downstream", status_code=200)(scope, receive, send)


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


@pytest.fixture
def registry() -> SchemaContextRegistry:
    return SchemaContextRegistry()


@pytest.fixture
def downstream() -> Downstream:
    return Downstream()


@pytest.fixture
def make_context() -> Any:
    """Factory for schema contexts whose engine is an AsyncMock."""

    def _make(side_effect: Any = None) -> MagicMock:
        ctx = MagicMock()
        ctx.migrations.migrate = AsyncMock(side_effect=side_effect)
        return ctx

    return _make


@pytest.fixture
def make_middleware(
    downstream: Downstream,
    logger: logging.Logger,
    registry: SchemaContextRegistry,
) -> Any:
    """Factory for a middleware listening on ``/migrate`` by default."""

    def _make(path: str = "/migrate") -> MigrationsEndpointMiddleware:
        return MigrationsEndpointMiddleware(
            downstream,
            logger=logger,
            options=MigrationsEndpointOptions(path=path),
            registry=registry,
        )

    return _make


@pytest.fixture
def call_asgi() -> Any:
    """Drive an ASGI app with a url-encoded form request."""

    async def _call(
        app: ASGIApp,
        path: str = "/migrate",
        form: dict[str, str] | list[tuple[str, str]] | None = None,
        method: str = "POST",
        root_path: str = "",
    ) -> ASGIResult:
        body = urlencode(form or {}).encode()
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [
                (b"content-type", b"application/x-www-form-urlencoded"),
                (b"content-length", str(len(body)).encode()),
            ],
            "root_path": root_path,
        }
        result = ASGIResult()
        sent = False

        async def receive() -> dict[str, Any]:
            nonlocal sent
            if sent:
                return {"type": "http.disconnect"}
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}

        async def send(message: dict[str, Any]) -> None:
            result.messages.append(message)

        await app(scope, receive, send)
        return result

    return _call
