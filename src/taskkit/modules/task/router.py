"""Task router mapping the five task endpoints onto the store."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from fastapi import Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as PydanticValidationError

from taskkit.core.api.router import Router
from taskkit.core.exceptions import ValidationError

from .repository import TaskStore
from .schemas import ID_MAX, ID_MIN, TaskCreated, TaskIn, TaskOut, TaskUpdate

TASK_NOT_FOUND = "Task not found"
MISSING_TITLE = "Missing task title"
MISSING_PROPERTIES = "Missing task properties"


def _parse_id(raw: str) -> int | None:
    """Parse a path id; anything that is not a storable integer matches no task."""
    try:
        id = int(raw)
    except ValueError:
        return None
    return id if ID_MIN <= id <= ID_MAX else None


async def _read_body(request: Request) -> Any:
    """Decode the JSON request body, or None when absent or malformed."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


class TaskRouter(Router):
    """Router for Task CRUD over a TaskStore.

    Validation is shape only: update and delete of an id with no row still
    answer 200.
    """

    def __init__(self, prefix: str, tags: Sequence[str], store_factory: Any, **kwargs: Any) -> None:
        """Initialize task router with a dependency yielding a TaskStore."""
        self.store_factory = store_factory
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        """Register task CRUD routes."""
        store_factory = self.store_factory

        @self.router.get("", response_model=list[TaskOut], summary="List tasks")
        async def get_tasks(store: TaskStore = Depends(store_factory)) -> list[TaskOut]:
            return await store.get_all()

        @self.router.get(
            "/{task_id}",
            response_model=TaskOut,
            summary="Get task",
            responses={status.HTTP_404_NOT_FOUND: {"description": TASK_NOT_FOUND}},
        )
        async def get_task(task_id: str, store: TaskStore = Depends(store_factory)) -> Any:
            id = _parse_id(task_id)
            task = await store.get(id) if id is not None else None
            if task is None:
                return PlainTextResponse(TASK_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)
            return task

        @self.router.post("", response_model=TaskCreated, summary="Create task")
        async def create_task(request: Request, store: TaskStore = Depends(store_factory)) -> TaskCreated:
            body = await _read_body(request)
            try:
                data = TaskIn.model_validate(body)
            except PydanticValidationError:
                raise ValidationError(MISSING_TITLE)

            return TaskCreated(id=await store.create(data.title, data.description))

        @self.router.put("", summary="Update task", response_class=Response)
        async def update_task(request: Request, store: TaskStore = Depends(store_factory)) -> Response:
            body = await _read_body(request)
            try:
                task = TaskUpdate.model_validate(body)
            except PydanticValidationError:
                raise ValidationError(MISSING_PROPERTIES)

            await store.update(task)
            return Response(status_code=status.HTTP_200_OK)

        @self.router.delete("/{task_id}", summary="Delete task", response_class=Response)
        async def delete_task(task_id: str, store: TaskStore = Depends(store_factory)) -> Response:
            id = _parse_id(task_id)
            if id is not None:
                await store.delete(id)
            return Response(status_code=status.HTTP_200_OK)
