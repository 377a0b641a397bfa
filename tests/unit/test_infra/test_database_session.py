"""Tests for database session helpers."""

from __future__ import annotations

from sqlalchemy import inspect, text

from repo_catalog.infra.database import (
    close_database,
    get_async_session,
    get_engine,
    init_database,
)


async def test_engine_uses_configured_url(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    try:
        engine = get_engine()
        assert str(engine.url) == "sqlite+aiosqlite:///:memory:"
        assert get_engine() is engine
    finally:
        await close_database()


async def test_init_database_creates_tables(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    try:
        await init_database(create_tables=True)

        async with get_engine().connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert {"repositories", "repository_summary", "repository_commits"} <= set(tables)
    finally:
        await close_database()


async def test_get_async_session_yields_working_session(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    try:
        async with get_async_session() as session:
            result = await session.execute(text("SELECT 1"))
            assert result.scalar_one() == 1
    finally:
        await close_database()


async def test_close_database_without_engine_is_noop():
    await close_database()
    await close_database()
