"""add_migrations_endpoint() — install the middleware on a Starlette/FastAPI app."""

from __future__ import annotations

import logging
from typing import Any

from fastapi_migrations_endpoint.middleware import MigrationsEndpointMiddleware
from fastapi_migrations_endpoint.options import DEFAULT_PATH, MigrationsEndpointOptions
from fastapi_migrations_endpoint.registry import SchemaContextRegistry

DEFAULT_LOGGER_NAME = "fastapi_migrations_endpoint"


def add_migrations_endpoint(
    app: Any,
    registry: SchemaContextRegistry,
    *,
    path: str = DEFAULT_PATH,
    logger: logging.Logger | None = None,
) -> MigrationsEndpointOptions:
    """Register :class:`MigrationsEndpointMiddleware` on ``app``.

    Must be called before the app starts serving, as Starlette builds its
    middleware stack on first request.
    """
    options = MigrationsEndpointOptions(path=path)
    app.add_middleware(
        MigrationsEndpointMiddleware,
        logger=logger or logging.getLogger(DEFAULT_LOGGER_NAME),
        options=options,
        registry=registry,
    )
    return options
