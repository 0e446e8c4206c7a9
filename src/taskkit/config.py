"""Service settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

_FALSY = {"0", "false", "no", "off", ""}


class Settings(BaseModel):
    """Runtime settings; the database URL is the only persisted target."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    database_url: str = "sqlite+aiosqlite:///./tasks.db"
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    logging: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``TASKKIT_*`` environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if "TASKKIT_DATABASE_URL" in env:
            values["database_url"] = env["TASKKIT_DATABASE_URL"]
        if "TASKKIT_HOST" in env:
            values["host"] = env["TASKKIT_HOST"]
        if "TASKKIT_PORT" in env:
            values["port"] = env["TASKKIT_PORT"]
        if "TASKKIT_LOGGING" in env:
            values["logging"] = env["TASKKIT_LOGGING"].strip().lower() not in _FALSY
        return cls.model_validate(values)
