"""MigrationsEndpointException hierarchy for surfaced endpoint failures."""

from __future__ import annotations


class MigrationsEndpointException(Exception):
    """Base for all migrations endpoint exceptions."""


class MigrationsEndpointError(MigrationsEndpointException):
    """Migration engine failure wrapped with the schema context it targeted."""

    def __init__(
        self, detail: str, *, context_name: str, cause: BaseException | None = None
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.context_name = context_name
        self.cause = cause


class SchemaContextResolutionError(MigrationsEndpointException):
    """A registered schema context name produced no instance."""

    def __init__(self, detail: str, *, context_name: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.context_name = context_name


class DuplicateSchemaContextError(MigrationsEndpointException, ValueError):
    """The same schema context name was registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Schema context '{name}' is already registered")
        self.name = name
