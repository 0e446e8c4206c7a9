"""Taskkit - task tracking REST service and its HTTP client tier."""

__version__ = "0.1.0"

# Core framework
from taskkit.core import Base, Database, StoreError, TaskkitError, ValidationError

# Task feature
from taskkit.modules.task import Task, TaskCreated, TaskIn, TaskOut, TaskRouter, TaskStore, TaskUpdate

__all__ = [
    # Core framework
    "Database",
    "Base",
    "TaskkitError",
    "StoreError",
    "ValidationError",
    # Task feature
    "Task",
    "TaskIn",
    "TaskOut",
    "TaskUpdate",
    "TaskCreated",
    "TaskStore",
    "TaskRouter",
    "__version__",
]
