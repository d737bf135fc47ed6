"""MigrationsEndpointMiddleware — remote trigger for schema migrations."""

from __future__ import annotations

import logging

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from fastapi_migrations_endpoint import events, messages
from fastapi_migrations_endpoint._types import SchemaContext
from fastapi_migrations_endpoint.exceptions import (
    MigrationsEndpointError,
    SchemaContextResolutionError,
)
from fastapi_migrations_endpoint.options import MigrationsEndpointOptions
from fastapi_migrations_endpoint.outcome import MigrationFailed, apply_migrations
from fastapi_migrations_endpoint.registry import SchemaContextRegistry

CONTEXT_FIELD = "context"

# Bodies shorter than this are replaced by "friendly" error pages in some browsers
MIN_ERROR_BODY_LENGTH = 513

NO_CACHE_HEADERS = {"Pragma": "no-cache", "Cache-Control": "no-cache,no-store"}


class MigrationsEndpointMiddleware:
    """Applies pending migrations for a schema context posted to one path.

    Requests to any other path are forwarded to the wrapped app untouched.
    A matching request is answered here and never forwarded:

    * ``400`` (padded plain text) when the ``context`` form field is missing
      or names a schema context that is not registered,
    * ``204`` once the context's migration engine completes,
    * :class:`MigrationsEndpointError` raised to the framework when the
      engine fails.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        logger: logging.Logger,
        options: MigrationsEndpointOptions,
        registry: SchemaContextRegistry,
    ) -> None:
        for arg_name, value in (
            ("app", app),
            ("logger", logger),
            ("options", options),
            ("registry", registry),
        ):
            if value is None:
                raise ValueError(f"{arg_name} must not be None")

        self._app = app
        self._logger = logger
        self._options = options
        self._registry = registry

    @property
    def options(self) -> MigrationsEndpointOptions:
        return self._options

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope is None:
            raise ValueError("scope must not be None")

        if scope["type"] != "http" or not self._options.matches(route_path(scope)):
            await self._app(scope, receive, send)
            return

        await self._handle(Request(scope, receive), send)

    async def _handle(self, request: Request, send: Send) -> None:
        events.request_path_matched(self._logger, route_path(request.scope))

        resolved = await self.get_schema_context(request, send)
        if resolved is None:
            return

        context_name, context = resolved
        events.applying_migrations(self._logger, context_name)

        outcome = await apply_migrations(context, context_name)
        if isinstance(outcome, MigrationFailed):
            events.migrations_endpoint_exception(
                self._logger, context_name, outcome.error
            )
            raise MigrationsEndpointError(
                messages.migrations_failed(context_name, outcome.error),
                context_name=context_name,
                cause=outcome.error,
            ) from outcome.error

        response = Response(status_code=204, headers=NO_CACHE_HEADERS)
        await response(request.scope, request.receive, send)

        events.migrations_applied(self._logger, context_name)

    async def get_schema_context(
        self, request: Request, send: Send
    ) -> tuple[str, SchemaContext] | None:
        """Resolve the schema context named by the request's form data.

        Writes the 400 response and returns ``None`` when the name is
        missing or not registered.
        """
        async with request.form() as form:
            values = [v for v in form.getlist(CONTEXT_FIELD) if isinstance(v, str)]

        # Repeated fields are joined, so they never equal a registered name
        context_name = ",".join(values)
        if not context_name.strip():
            events.no_context_type(self._logger)
            await write_error_response(request, send, messages.NO_CONTEXT_TYPE)
            return None

        registered = (d.name for d in self._registry.descriptors())
        if not any(name == context_name for name in registered):
            events.context_not_registered(self._logger, context_name)
            await write_error_response(
                request, send, messages.context_not_registered(context_name)
            )
            return None

        context = await self._registry.resolve(context_name)
        if context is None:
            events.invalid_context_type(self._logger, context_name)
            raise SchemaContextResolutionError(
                messages.context_not_resolved(context_name), context_name=context_name
            )

        return context_name, context


def route_path(scope: Scope) -> str:
    """Request path relative to the app, without the ``root_path`` mount prefix."""
    path: str = scope["path"]
    root_path: str = scope.get("root_path", "")
    if not root_path or not path.startswith(root_path):
        return path
    if path == root_path:
        return "/"
    if path[len(root_path)] == "/":
        return path[len(root_path) :]
    return path


async def write_error_response(request: Request, send: Send, error: str) -> None:
    """Send a no-cache ``400`` whose body is ``error`` padded with spaces."""
    response = Response(
        error.ljust(MIN_ERROR_BODY_LENGTH),
        status_code=400,
        headers=NO_CACHE_HEADERS,
        media_type="text/plain",
    )
    await response(request.scope, request.receive, send)
