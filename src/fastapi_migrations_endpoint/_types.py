"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class MigrationEngine(Protocol):
    """Applies all pending migrations for one schema context."""

    async def migrate(self) -> None: ...


@runtime_checkable
class SchemaContext(Protocol):
    """Handle onto one logical database, exposing its migration engine."""

    @property
    def migrations(self) -> MigrationEngine: ...


# Returns a SchemaContext, or an awaitable resolving to one
SchemaContextFactory = Callable[[], "SchemaContext | Awaitable[SchemaContext | None] | None"]
