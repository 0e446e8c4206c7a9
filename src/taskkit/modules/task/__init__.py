"""Task feature - the Tasks table, its store, and its REST router."""

from .models import Task
from .repository import TaskStore
from .router import MISSING_PROPERTIES, MISSING_TITLE, TASK_NOT_FOUND, TaskRouter
from .schemas import TaskCreated, TaskIn, TaskOut, TaskUpdate

__all__ = [
    "Task",
    "TaskIn",
    "TaskOut",
    "TaskUpdate",
    "TaskCreated",
    "TaskStore",
    "TaskRouter",
    "TASK_NOT_FOUND",
    "MISSING_TITLE",
    "MISSING_PROPERTIES",
]
