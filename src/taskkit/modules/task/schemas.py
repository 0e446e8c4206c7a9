"""Task schemas for request validation and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Range of a SQL INTEGER primary key.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class TaskIn(BaseModel):
    """Body of a create request: a non-empty title and a description."""

    model_config = ConfigDict(strict=True)

    title: str = Field(min_length=1, description="Task title")
    description: str = Field(description="Free-text description, may be empty")


class TaskOut(BaseModel):
    """Task as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Store-assigned task identifier")
    title: str = Field(description="Task title")
    description: str = Field(default="", description="Free-text description")
    done: bool = Field(default=False, description="Whether the task is completed")


class TaskUpdate(TaskOut):
    """Full replacement body of an update request; every field is required."""

    model_config = ConfigDict(strict=True)

    id: int = Field(ge=ID_MIN, le=ID_MAX)
    title: str = Field(min_length=1)
    description: str
    done: bool


class TaskCreated(BaseModel):
    """Response of a create request."""

    id: int = Field(description="Identifier assigned to the new task")
