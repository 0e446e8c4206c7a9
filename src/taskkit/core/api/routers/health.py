"""Health check router."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from taskkit.core.logging import get_logger

from ..router import Router

logger = get_logger(__name__)


class HealthState(StrEnum):
    """Health state reported by a check."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


HealthCheck = Callable[[], Awaitable[tuple[HealthState, str | None]]]


class CheckResult(BaseModel):
    """Outcome of one named check."""

    state: HealthState
    message: str | None = Field(default=None, description="Failure detail, if any")


class HealthStatus(BaseModel):
    """Overall service health."""

    status: HealthState
    checks: dict[str, CheckResult] | None = None


class HealthRouter(Router):
    """Reports healthy only while every registered check passes."""

    def __init__(
        self,
        prefix: str,
        tags: list[str],
        checks: dict[str, HealthCheck] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize health router with named checks."""
        self.checks = dict(checks or {})
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        checks = self.checks

        @self.router.get("", summary="Health check", response_model=HealthStatus, response_model_exclude_none=True)
        async def health_check() -> HealthStatus:
            if not checks:
                return HealthStatus(status=HealthState.HEALTHY)

            results: dict[str, CheckResult] = {}
            for name, check in checks.items():
                try:
                    state, message = await check()
                except Exception as e:
                    logger.warning("health.check_failed", check=name, error=str(e))
                    state, message = HealthState.UNHEALTHY, f"Check failed: {e}"
                results[name] = CheckResult(state=state, message=message)

            healthy = all(result.state == HealthState.HEALTHY for result in results.values())
            return HealthStatus(status=HealthState.HEALTHY if healthy else HealthState.UNHEALTHY, checks=results)
