"""Core framework - database handle, ORM base, errors, and logging."""

from .database import Database
from .exceptions import StoreError, TaskkitError, ValidationError
from .logging import configure_logging, get_logger
from .models import Base

__all__ = [
    "Base",
    "Database",
    "TaskkitError",
    "StoreError",
    "ValidationError",
    "configure_logging",
    "get_logger",
]
