"""Service builder with the task module wired in."""

from __future__ import annotations

from typing import Any, List, Self

from fastapi import FastAPI

from taskkit.core.api.service_builder import API_PREFIX, BaseServiceBuilder, ServiceInfo
from taskkit.modules.task import TaskRouter

from .dependencies import get_task_store

__all__ = ["ServiceBuilder", "ServiceInfo"]


class ServiceBuilder(BaseServiceBuilder):
    """Fluent builder for the task-tracking service."""

    def __init__(self, *, info: ServiceInfo, **kwargs: Any) -> None:
        """Initialize service builder."""
        super().__init__(info=info, **kwargs)
        self._task_options: tuple[str, List[str]] | None = None

    def with_tasks(self, *, prefix: str = f"{API_PREFIX}/tasks", tags: List[str] | None = None) -> Self:
        """Add the task CRUD endpoints."""
        self._task_options = (prefix, list(tags) if tags is not None else ["tasks"])
        return self

    def _register_module_routers(self, app: FastAPI) -> None:
        if self._task_options is None:
            return
        prefix, tags = self._task_options
        app.include_router(TaskRouter.create(prefix=prefix, tags=tags, store_factory=get_task_store))
