"""SchemaContextRegistry — explicit name-to-factory mapping of schema contexts."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from fastapi_migrations_endpoint._types import SchemaContext, SchemaContextFactory
from fastapi_migrations_endpoint.exceptions import DuplicateSchemaContextError

_F = TypeVar("_F", bound=Callable[..., object])


def qualified_name(factory: Callable[..., object]) -> str:
    """Default identity of a factory: ``module.QualName``."""
    module = getattr(factory, "__module__", None)
    qualname = getattr(factory, "__qualname__", None) or type(factory).__qualname__
    return f"{module}.{qualname}" if module else qualname


@dataclass(frozen=True)
class SchemaContextDescriptor:
    """One schema context known to the application."""

    name: str
    factory: SchemaContextFactory


class SchemaContextRegistry:
    """Application-wide set of schema contexts that may be migrated remotely.

    Built once at configuration time. Lookups are keyed by the exact
    registered name; nothing is resolved by reflection.
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, SchemaContextDescriptor] = {}

    def register(
        self, factory: SchemaContextFactory, *, name: str | None = None
    ) -> SchemaContextDescriptor:
        key = name if name is not None else qualified_name(factory)
        if key in self._descriptors:
            raise DuplicateSchemaContextError(key)
        descriptor = SchemaContextDescriptor(name=key, factory=factory)
        self._descriptors[key] = descriptor
        return descriptor

    def schema_context(self, name: str | None = None) -> Callable[[_F], _F]:
        """Class decorator form of :meth:`register`."""

        def decorator(factory: _F) -> _F:
            self.register(factory, name=name)
            return factory

        return decorator

    def descriptors(self) -> tuple[SchemaContextDescriptor, ...]:
        return tuple(self._descriptors.values())

    async def resolve(self, name: str) -> SchemaContext | None:
        descriptor = self._descriptors.get(name)
        if descriptor is None:
            return None
        instance = descriptor.factory()
        if inspect.isawaitable(instance):
            instance = await instance
        return instance

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
