"""Tests for apply_migrations and the MigrationOutcome variants."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from fastapi_migrations_endpoint.outcome import (
    MigrationApplied,
    MigrationFailed,
    apply_migrations,
)


class TestApplyMigrations:
    async def test_success_returns_applied(self, make_context: Any) -> None:
        ctx = make_context()
        outcome = await apply_migrations(ctx, "billing")
        assert outcome == MigrationApplied(context_name="billing")
        ctx.migrations.migrate.assert_awaited_once_with()

    async def test_failure_returns_failed_with_error(self, make_context: Any) -> None:
        error = RuntimeError("disk full")
        outcome = await apply_migrations(make_context(error), "billing")
        assert isinstance(outcome, MigrationFailed)
        assert outcome.context_name == "billing"
        assert outcome.error is error

    async def test_cancellation_propagates(self, make_context: Any) -> None:
        with pytest.raises(asyncio.CancelledError):
            await apply_migrations(make_context(asyncio.CancelledError()), "billing")
