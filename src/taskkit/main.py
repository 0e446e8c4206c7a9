"""Application factory for the task-tracking service."""

from __future__ import annotations

from fastapi import FastAPI

from taskkit import __version__
from taskkit.api import ServiceBuilder, ServiceInfo
from taskkit.config import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the service from settings (environment by default)."""
    settings = settings or Settings.from_env()
    return (
        ServiceBuilder(
            info=ServiceInfo(
                display_name="Taskkit",
                version=__version__,
                summary="Task tracking REST service",
            ),
            database_url=settings.database_url,
        )
        .with_logging(settings.logging)
        .with_health()
        .with_tasks()
        .build()
    )
