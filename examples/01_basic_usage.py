"""
Basic usage example of fastapi-migrations-endpoint.

Demonstrates:
- Registering schema contexts with a SchemaContextRegistry
- Installing the migrations endpoint on a FastAPI app
- Triggering migrations with a form POST
"""

import logging

from fastapi import FastAPI

from fastapi_migrations_endpoint import (
    AlembicMigrationEngine,
    SchemaContextRegistry,
    add_migrations_endpoint,
)

logging.basicConfig(level=logging.DEBUG)

registry = SchemaContextRegistry()


@registry.schema_context(name="app.db.MainContext")
class MainContext:
    """Main application database, managed by Alembic."""

    def __init__(self) -> None:
        self.migrations = AlembicMigrationEngine("alembic.ini")


class InMemoryEngine:
    """Stand-in engine that has nothing to migrate."""

    async def migrate(self) -> None:
        return None


class CacheContext:
    migrations = InMemoryEngine()


# Factories may be any callable returning a context
registry.register(CacheContext, name="app.db.CacheContext")

app = FastAPI(title="Migrations Endpoint Example")


@app.get("/")
async def index():
    return {"contexts": [d.name for d in registry.descriptors()]}


add_migrations_endpoint(app, registry, path="/ApplyDatabaseMigrations")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -i -X POST -d context=app.db.CacheContext http://localhost:8000/ApplyDatabaseMigrations
    # curl -i -X POST http://localhost:8000/ApplyDatabaseMigrations
