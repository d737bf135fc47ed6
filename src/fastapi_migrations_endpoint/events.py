"""Structured log events emitted by the migrations endpoint."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any


class EventId(IntEnum):
    """Stable identifiers attached to every record as ``event_id``."""

    NO_CONTEXT_TYPE = 1
    INVALID_CONTEXT_TYPE = 2
    CONTEXT_NOT_REGISTERED = 3
    REQUEST_PATH_MATCHED = 4
    APPLYING_MIGRATIONS = 5
    MIGRATIONS_APPLIED = 6
    MIGRATIONS_ENDPOINT_EXCEPTION = 7


def _extra(event: EventId, **fields: Any) -> dict[str, Any]:
    return {"event_id": int(event), "event": event.name.lower(), **fields}


def request_path_matched(logger: logging.Logger, path: str) -> None:
    logger.debug(
        "Request path matched the migrations endpoint path '%s'",
        path,
        extra=_extra(EventId.REQUEST_PATH_MATCHED, path=path),
    )


def no_context_type(logger: logging.Logger) -> None:
    logger.error(
        "No schema context type was specified in the request form",
        extra=_extra(EventId.NO_CONTEXT_TYPE),
    )


def context_not_registered(logger: logging.Logger, context_name: str) -> None:
    logger.error(
        "Schema context '%s' is not registered",
        context_name,
        extra=_extra(EventId.CONTEXT_NOT_REGISTERED, context_name=context_name),
    )


def invalid_context_type(logger: logging.Logger, context_name: str) -> None:
    logger.error(
        "Schema context '%s' could not be resolved from the registry",
        context_name,
        extra=_extra(EventId.INVALID_CONTEXT_TYPE, context_name=context_name),
    )


def applying_migrations(logger: logging.Logger, context_name: str) -> None:
    logger.debug(
        "Applying migrations for schema context '%s'",
        context_name,
        extra=_extra(EventId.APPLYING_MIGRATIONS, context_name=context_name),
    )


def migrations_applied(logger: logging.Logger, context_name: str) -> None:
    logger.debug(
        "Migrations successfully applied for schema context '%s'",
        context_name,
        extra=_extra(EventId.MIGRATIONS_APPLIED, context_name=context_name),
    )


def migrations_endpoint_exception(
    logger: logging.Logger, context_name: str, error: BaseException
) -> None:
    logger.error(
        "An error occurred while applying the migrations for '%s'",
        context_name,
        exc_info=error,
        extra=_extra(EventId.MIGRATIONS_ENDPOINT_EXCEPTION, context_name=context_name),
    )
