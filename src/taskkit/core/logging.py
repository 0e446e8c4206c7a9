"""Structured logging configuration built on structlog."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor


def configure_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """Configure structlog and stdlib logging for the service.

    Level defaults to ``LOG_LEVEL`` (``INFO``) and the renderer to JSON when
    ``LOG_FORMAT=json``, otherwise a console renderer.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "console").lower() == "json"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level_name)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level_name, stream=sys.stderr, format="%(message)s", force=True)
    # uvicorn access logs duplicate the request logging middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger with the given name bound as ``logger_name``."""
    if name is not None:
        initial_values["logger_name"] = name
    return structlog.get_logger(**initial_values)
