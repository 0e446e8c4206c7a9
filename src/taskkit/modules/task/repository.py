"""Task store issuing one parameterized statement per operation."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from taskkit.core import Database, StoreError
from taskkit.core.logging import get_logger

from .models import Task
from .schemas import TaskOut

logger = get_logger(__name__)


def _to_output(task: Task) -> TaskOut:
    """Build the response schema; NULL description and done read as empty and false."""
    return TaskOut(id=task.id, title=task.title, description=task.description or "", done=bool(task.done))


class TaskStore:
    """Data access for the Tasks table.

    Every operation opens its own session on the injected database handle and
    runs a single statement. Failures of the underlying query are raised as
    ``StoreError``. ``update`` and ``delete`` do not report whether a row
    matched.
    """

    def __init__(self, database: Database) -> None:
        """Initialize task store with a database handle."""
        self.database = database

    async def get(self, id: int) -> TaskOut | None:
        """Return the task with the given id, or None if it does not exist."""
        stmt = select(Task).where(Task.id == id)
        try:
            async with self.database.session() as session:
                task = (await session.execute(stmt)).scalar_one_or_none()
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(str(e)) from e
        return _to_output(task) if task is not None else None

    async def get_all(self) -> list[TaskOut]:
        """Return all tasks in creation order."""
        stmt = select(Task).order_by(Task.id)
        try:
            async with self.database.session() as session:
                tasks = (await session.execute(stmt)).scalars().all()
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(str(e)) from e
        return [_to_output(task) for task in tasks]

    async def create(self, title: str, description: str) -> int:
        """Insert a new task and return its assigned id."""
        task = Task(title=title, description=description)
        try:
            async with self.database.session() as session:
                session.add(task)
                await session.commit()
                task_id = task.id
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(str(e)) from e
        logger.debug("task.created", task_id=task_id)
        return task_id

    async def update(self, task: TaskOut) -> None:
        """Replace title, description and done of the task with ``task.id``."""
        stmt = (
            update(Task)
            .where(Task.id == task.id)
            .values(title=task.title, description=task.description, done=task.done)
        )
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                await session.commit()
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(str(e)) from e
        logger.debug("task.updated", task_id=task.id, matched=result.rowcount)

    async def delete(self, id: int) -> None:
        """Remove the task with the given id."""
        stmt = delete(Task).where(Task.id == id)
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                await session.commit()
        except (SQLAlchemyError, OverflowError) as e:
            raise StoreError(str(e)) from e
        logger.debug("task.deleted", task_id=id, matched=result.rowcount)
