"""Tests for the Database handle."""

from __future__ import annotations

import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import cast

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

import taskkit.core.database as database_module
from taskkit import Database


def test_install_sqlite_pragmas(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SQLite connect pragmas are installed on new connections."""
    captured: dict[str, object] = {}

    def fake_listen(target: object, event_name: str, handler: object) -> None:
        captured["target"] = target
        captured["event_name"] = event_name
        captured["handler"] = handler

    fake_engine = cast(AsyncEngine, SimpleNamespace(sync_engine=object()))
    monkeypatch.setattr(database_module.event, "listen", fake_listen)

    database_module._install_sqlite_connect_pragmas(fake_engine)

    assert captured["target"] is fake_engine.sync_engine
    assert captured["event_name"] == "connect"
    handler = captured["handler"]
    assert callable(handler)

    class DummyCursor:
        def __init__(self) -> None:
            self.commands: list[str] = []
            self.closed = False

        def execute(self, sql: str) -> None:
            self.commands.append(sql)

        def close(self) -> None:
            self.closed = True

    class DummyConnection:
        def __init__(self) -> None:
            self._cursor = DummyCursor()

        def cursor(self) -> DummyCursor:
            return self._cursor

    connection = DummyConnection()
    handler(connection, None)

    assert connection._cursor.commands == [
        "PRAGMA synchronous=NORMAL;",
        "PRAGMA busy_timeout=30000;",
        "PRAGMA temp_store=MEMORY;",
    ]
    assert connection._cursor.closed is True


class TestDatabase:
    """Tests for the Database class."""

    async def test_init_creates_tasks_table(self) -> None:
        """Test that init() creates the Tasks table with its columns."""
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.init()

        async with db.session() as session:
            result = await session.execute(text("SELECT name FROM pragma_table_info('Tasks') ORDER BY cid"))
            assert [row[0] for row in result] == ["id", "title", "description", "done"]

        await db.dispose()

    async def test_init_is_idempotent(self) -> None:
        """Test that calling init() twice keeps existing rows."""
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.init()

        async with db.session() as session:
            await session.execute(text("INSERT INTO Tasks (title, description) VALUES ('t', 'd')"))
            await session.commit()

        await db.init()

        async with db.session() as session:
            result = await session.execute(text("SELECT count(*) FROM Tasks"))
            assert result.scalar() == 1

        await db.dispose()

    async def test_done_defaults_to_false(self) -> None:
        """Test that rows inserted without done read back as false."""
        db = Database("sqlite+aiosqlite:///:memory:")
        await db.init()

        async with db.session() as session:
            await session.execute(text("INSERT INTO Tasks (title, description) VALUES ('t', 'd')"))
            await session.commit()
            result = await session.execute(text("SELECT done FROM Tasks"))
            assert result.scalar() == 0

        await db.dispose()

    async def test_echo_parameter(self) -> None:
        """Test that echo parameter is passed to engine."""
        db_echo = Database("sqlite+aiosqlite:///:memory:", echo=True)
        db_no_echo = Database("sqlite+aiosqlite:///:memory:", echo=False)

        assert db_echo.engine.echo is True
        assert db_no_echo.engine.echo is False

        await db_echo.dispose()
        await db_no_echo.dispose()

    async def test_is_sqlite(self) -> None:
        """Test that the URL determines whether SQLite pragmas apply."""
        db = Database("sqlite+aiosqlite:///:memory:")
        assert db.is_sqlite is True
        assert db.url == "sqlite+aiosqlite:///:memory:"
        await db.dispose()

    async def test_session_factory_configuration(self) -> None:
        """Test that sessions keep attributes loaded after commit."""
        db = Database("sqlite+aiosqlite:///:memory:")
        assert db._session_factory.kw.get("expire_on_commit") is False
        await db.dispose()

    async def test_file_based_database_uses_wal(self) -> None:
        """Test that file-based databases are switched to WAL journaling."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            db = Database(f"sqlite+aiosqlite:///{Path(tmp_dir) / 'tasks.db'}")
            await db.init()

            async with db.session() as session:
                result = await session.execute(text("PRAGMA journal_mode"))
                assert result.scalar() == "wal"

            await db.dispose()
