"""HTTP client mirroring the task endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from taskkit.core.exceptions import TaskkitError
from taskkit.core.logging import get_logger
from taskkit.modules.task.schemas import TaskCreated, TaskOut

logger = get_logger(__name__)

DEFAULT_BASE_PATH = "/api/v2/tasks"


class TaskServiceError(TaskkitError):
    """A task request failed; ``status_code`` is None for transport failures."""

    def __init__(self, status_code: int | None, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TaskService:
    """Client-side mirror of the five task operations."""

    def __init__(self, client: httpx.AsyncClient, base_path: str = DEFAULT_BASE_PATH) -> None:
        """Initialize task service over an existing httpx client."""
        self.client = client
        self.base_path = base_path.rstrip("/")

    @classmethod
    @asynccontextmanager
    async def connect(cls, base_url: str, base_path: str = DEFAULT_BASE_PATH) -> AsyncIterator[TaskService]:
        """Open a task service that owns its httpx client."""
        async with httpx.AsyncClient(base_url=base_url) as client:
            yield cls(client, base_path)

    async def get_all(self) -> list[TaskOut]:
        """Fetch all tasks."""
        response = await self._request("GET", self.base_path)
        return [TaskOut.model_validate(item) for item in response.json()]

    async def get(self, id: int) -> TaskOut:
        """Fetch one task."""
        response = await self._request("GET", f"{self.base_path}/{id}")
        return TaskOut.model_validate(response.json())

    async def create(self, title: str, description: str) -> int:
        """Create a task and return its new id."""
        response = await self._request("POST", self.base_path, json={"title": title, "description": description})
        return TaskCreated.model_validate(response.json()).id

    async def update(self, task: TaskOut) -> None:
        """Replace a task's title, description and done flag."""
        await self._request("PUT", self.base_path, json=task.model_dump())

    async def delete(self, id: int) -> None:
        """Delete a task."""
        await self._request("DELETE", f"{self.base_path}/{id}")

    async def _request(self, method: str, url: str, **kwargs: object) -> httpx.Response:
        try:
            response = await self.client.request(method, url, **kwargs)  # type: ignore[arg-type]
        except httpx.TransportError as e:
            logger.warning("task_service.transport_failed", method=method, url=url, error=str(e))
            raise TaskServiceError(None, str(e) or type(e).__name__) from e

        if response.is_error:
            logger.warning("task_service.request_failed", method=method, url=url, status_code=response.status_code)
            raise TaskServiceError(response.status_code, response.text or response.reason_phrase)
        return response
