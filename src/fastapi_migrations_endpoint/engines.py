"""Migration engine adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.concurrency import run_in_threadpool

if TYPE_CHECKING:
    from alembic.config import Config


class AlembicMigrationEngine:
    """Upgrades an Alembic-managed database to ``revision``.

    Alembic commands are blocking, so the upgrade runs in the threadpool.
    Requires the ``alembic`` extra.
    """

    def __init__(self, config_path: str = "alembic.ini", revision: str = "head") -> None:
        from alembic import command
        from alembic.config import Config

        self._command = command
        self._config = Config(config_path)
        self.revision = revision

    @property
    def config(self) -> Config:
        return self._config

    async def migrate(self) -> None:
        await run_in_threadpool(self._command.upgrade, self._config, self.revision)
