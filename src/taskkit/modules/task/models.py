"""Task ORM model."""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from taskkit.core.models import Base


class Task(Base):
    """ORM model for a tracked task."""

    __tablename__ = "Tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    done: Mapped[bool | None] = mapped_column(Boolean, nullable=True, server_default=false())
