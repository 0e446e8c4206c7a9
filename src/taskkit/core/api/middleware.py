"""Error handlers and request logging middleware."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse
from ulid import ULID

from taskkit.core.exceptions import StoreError, ValidationError
from taskkit.core.logging import get_logger

logger = get_logger(__name__)


async def validation_error_handler(request: Request, exc: Exception) -> Response:
    """Map ValidationError to 400 with its fixed message as plain text."""
    message = exc.message if isinstance(exc, ValidationError) else str(exc)
    logger.warning("request.invalid", method=request.method, path=request.url.path, message=message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def store_error_handler(request: Request, exc: Exception) -> Response:
    """Map StoreError to 500 with the raw error as plain text."""
    logger.error("store.failed", method=request.method, path=request.url.path, error=str(exc))
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def add_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for validation and store errors."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)


def add_logging_middleware(app: FastAPI) -> None:
    """Log every request with a bound request id and its duration."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request_id = str(ULID())
        structlog.contextvars.bind_contextvars(request_id=request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        logger.info(
            "http.request.completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        response.headers["X-Request-ID"] = request_id
        return response
