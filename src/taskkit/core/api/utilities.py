"""Helpers for serving built applications."""

from __future__ import annotations

from typing import Any

import uvicorn
from fastapi import FastAPI


def run_app(app: FastAPI | str, *, host: str = "127.0.0.1", port: int = 3000, **kwargs: Any) -> None:
    """Serve an application (or an ``module:attr`` import string) with uvicorn."""
    uvicorn.run(app, host=host, port=port, log_config=None, **kwargs)
