"""Shared fixtures for store, router and client tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from taskkit import Database, TaskStore
from taskkit.api import ServiceBuilder, ServiceInfo


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create and initialize in-memory database for testing."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.init()
    try:
        yield db
    finally:
        await db.dispose()


@pytest.fixture
def store(database: Database) -> TaskStore:
    """Task store over the in-memory database."""
    return TaskStore(database)


@pytest.fixture
def service_info() -> ServiceInfo:
    """Provide basic service info for tests."""
    return ServiceInfo(display_name="Test Tasks", version="1.0.0", summary="Task service for unit tests")


@pytest.fixture
def app(service_info: ServiceInfo) -> FastAPI:
    """Task service app backed by an in-memory database."""
    return ServiceBuilder(info=service_info).with_health().with_tasks().build()


@pytest.fixture
async def http_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async client talking to the app in-process, with its lifespan running."""
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            yield client
