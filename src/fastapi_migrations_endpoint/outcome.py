"""MigrationOutcome — typed result of one delegated migration run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from fastapi_migrations_endpoint._types import SchemaContext


@dataclass(frozen=True)
class MigrationApplied:
    """The engine completed; the schema is up to date."""

    context_name: str


@dataclass(frozen=True)
class MigrationFailed:
    """The engine raised while applying migrations."""

    context_name: str
    error: Exception


MigrationOutcome = Union[MigrationApplied, MigrationFailed]


async def apply_migrations(context: SchemaContext, context_name: str) -> MigrationOutcome:
    """Run all pending migrations for ``context`` and report the outcome."""
    try:
        await context.migrations.migrate()
    except Exception as exc:
        return MigrationFailed(context_name=context_name, error=exc)
    return MigrationApplied(context_name=context_name)
