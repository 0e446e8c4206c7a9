"""Tests for ServiceBuilder functionality."""

from __future__ import annotations

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from taskkit import Database, StoreError, TaskStore
from taskkit.api import ServiceBuilder, ServiceInfo, get_task_store
from taskkit.core.api.routers.health import HealthState


def test_service_builder_creates_basic_app(service_info: ServiceInfo) -> None:
    """Test that ServiceBuilder creates a FastAPI app with service metadata."""
    app = ServiceBuilder.create(info=service_info)

    assert isinstance(app, FastAPI)
    assert app.title == "Test Tasks"
    assert app.version == "1.0.0"


def test_service_builder_without_tasks_has_no_task_routes(service_info: ServiceInfo) -> None:
    """Test that task routes are only mounted by with_tasks()."""
    app = ServiceBuilder(info=service_info).build()

    with TestClient(app) as client:
        assert client.get("/api/v2/tasks").status_code == 404


def test_health_endpoint_checks_database(app: FastAPI) -> None:
    """Test that the health endpoint reports the database check."""
    with TestClient(app) as client:
        response = client.get("/api/v2/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"]["database"] == {"state": "healthy"}


def test_health_endpoint_reports_failing_check(service_info: ServiceInfo) -> None:
    """Test that one unhealthy check makes the service unhealthy."""

    async def broken() -> tuple[HealthState, str | None]:
        raise RuntimeError("boom")

    app = ServiceBuilder(info=service_info).with_health(checks={"broken": broken}).build()

    with TestClient(app) as client:
        data = client.get("/api/v2/health").json()

    assert data["status"] == "unhealthy"
    assert data["checks"]["broken"]["message"] == "Check failed: boom"
    assert data["checks"]["database"]["state"] == "healthy"


def test_health_check_name_validation(service_info: ServiceInfo) -> None:
    """Test that health check names with invalid characters are rejected at build time."""

    async def check() -> tuple[HealthState, str | None]:
        return (HealthState.HEALTHY, None)

    builder = ServiceBuilder(info=service_info).with_health(checks={"bad name!": check})

    with pytest.raises(ValueError, match="invalid characters"):
        builder.build()


def test_info_endpoint(app: FastAPI) -> None:
    """Test that the info endpoint returns service metadata."""
    with TestClient(app) as client:
        response = client.get("/api/v2/info")

    assert response.status_code == 200
    assert response.json()["display_name"] == "Test Tasks"


async def test_injected_database_is_used_and_not_disposed(database: Database, service_info: ServiceInfo) -> None:
    """Test that with_database_instance() shares the caller's database."""
    app = ServiceBuilder(info=service_info).with_database_instance(database).with_tasks().build()

    async with app.router.lifespan_context(app):
        assert app.state.database is database

    assert app.state.database is None
    # Still usable after shutdown: the builder does not own it
    assert await TaskStore(database).get_all() == []


def test_logging_middleware_sets_request_id(service_info: ServiceInfo) -> None:
    """Test that request logging adds an X-Request-ID header."""
    app = ServiceBuilder(info=service_info).with_logging().with_tasks().build()

    with TestClient(app) as client:
        response = client.get("/api/v2/tasks")

    assert response.status_code == 200
    assert len(response.headers["X-Request-ID"]) == 26


def test_custom_router_and_dependency_override(service_info: ServiceInfo) -> None:
    """Test that custom routers are included and dependencies can be overridden."""
    extra = APIRouter()

    @extra.get("/ping")
    async def ping() -> dict[str, str]:
        return {"pong": "ok"}

    class FailingStore:
        async def get_all(self) -> list[object]:
            raise StoreError("disk I/O error")

    app = (
        ServiceBuilder(info=service_info)
        .with_tasks()
        .include_router(extra)
        .override_dependency(get_task_store, lambda: FailingStore())
        .build()
    )

    with TestClient(app) as client:
        assert client.get("/ping").json() == {"pong": "ok"}
        response = client.get("/api/v2/tasks")

    assert response.status_code == 500
    assert response.text == "disk I/O error"


def test_startup_and_shutdown_hooks(service_info: ServiceInfo) -> None:
    """Test that lifecycle hooks run around the app lifespan."""
    events: list[str] = []

    async def on_start(app: FastAPI) -> None:
        events.append("start")

    async def on_stop(app: FastAPI) -> None:
        events.append("stop")

    app = ServiceBuilder(info=service_info).on_startup(on_start).on_shutdown(on_stop).build()

    with TestClient(app):
        assert events == ["start"]

    assert events == ["start", "stop"]
