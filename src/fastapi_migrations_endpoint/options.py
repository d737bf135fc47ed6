"""MigrationsEndpointOptions — immutable middleware configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PATH = "/ApplyDatabaseMigrations"


@dataclass(frozen=True)
class MigrationsEndpointOptions:
    """Request path the migrations endpoint listens on."""

    path: str = DEFAULT_PATH

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"Endpoint path must start with '/', got {self.path!r}")

    def matches(self, request_path: str) -> bool:
        # Per-character case folding only; "ß" does not match "SS"
        return request_path.lower() == self.path.lower()
