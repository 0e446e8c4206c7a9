"""Feature-specific FastAPI dependency injection for stores."""

from typing import Annotated

from fastapi import Depends

from taskkit.core import Database
from taskkit.core.api.dependencies import get_database
from taskkit.modules.task import TaskStore


async def get_task_store(database: Annotated[Database, Depends(get_database)]) -> TaskStore:
    """Get a task store bound to the application's database handle."""
    return TaskStore(database)
