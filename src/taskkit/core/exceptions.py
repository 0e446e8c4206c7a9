"""Error types raised by the store and request validation."""

from __future__ import annotations


class TaskkitError(Exception):
    """Base class for all taskkit errors."""


class ValidationError(TaskkitError):
    """Request body is malformed or incomplete; surfaced as 400 with a fixed message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StoreError(TaskkitError):
    """Underlying database statement failed; surfaced as 500 with the raw error."""
