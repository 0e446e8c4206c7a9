"""FastAPI dependency injection for the application's database handle."""

from fastapi import Request

from taskkit.core import Database


def get_database(request: Request) -> Database:
    """Get the database handle attached to the running application."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized. Build the app with a ServiceBuilder lifespan.")
    return database
