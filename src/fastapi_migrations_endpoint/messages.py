"""User-visible message strings."""

from __future__ import annotations

import traceback

NO_CONTEXT_TYPE = (
    "No context type was specified. Ensure the form data from the request "
    "includes a 'context' value, specifying the schema context to apply "
    "migrations for."
)


def context_not_registered(name: str) -> str:
    return (
        f"No schema context of type '{name}' is registered. Register it with "
        "the SchemaContextRegistry during application startup."
    )


def context_not_resolved(name: str) -> str:
    return (
        f"Schema context '{name}' is registered but its factory returned no "
        "instance."
    )


def migrations_failed(name: str, error: BaseException) -> str:
    """Failure message ending with the full formatted ``error``, traceback included."""
    details = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return (
        f"An error occurred while applying the migrations for '{name}'. "
        f"See the cause for details: {details}"
    )
