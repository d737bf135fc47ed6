"""FastAPI Migrations Endpoint - apply database schema migrations over HTTP."""

from fastapi_migrations_endpoint._types import MigrationEngine, SchemaContext
from fastapi_migrations_endpoint.builder import add_migrations_endpoint
from fastapi_migrations_endpoint.engines import AlembicMigrationEngine
from fastapi_migrations_endpoint.events import EventId
from fastapi_migrations_endpoint.exceptions import (
    DuplicateSchemaContextError,
    MigrationsEndpointError,
    MigrationsEndpointException,
    SchemaContextResolutionError,
)
from fastapi_migrations_endpoint.middleware import MigrationsEndpointMiddleware
from fastapi_migrations_endpoint.options import MigrationsEndpointOptions
from fastapi_migrations_endpoint.outcome import (
    MigrationApplied,
    MigrationFailed,
    MigrationOutcome,
    apply_migrations,
)
from fastapi_migrations_endpoint.registry import (
    SchemaContextDescriptor,
    SchemaContextRegistry,
)

__all__ = [
    "AlembicMigrationEngine",
    "DuplicateSchemaContextError",
    "EventId",
    "MigrationApplied",
    "MigrationEngine",
    "MigrationFailed",
    "MigrationOutcome",
    "MigrationsEndpointError",
    "MigrationsEndpointException",
    "MigrationsEndpointMiddleware",
    "MigrationsEndpointOptions",
    "SchemaContext",
    "SchemaContextDescriptor",
    "SchemaContextRegistry",
    "SchemaContextResolutionError",
    "add_migrations_endpoint",
    "apply_migrations",
]
