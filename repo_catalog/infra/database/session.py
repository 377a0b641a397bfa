"""Database session management on SQLAlchemy's async engine."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from repo_catalog.core.settings import get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Return the process-wide async engine, creating it on first use."""
    global _engine, _session_factory
    if _engine is None:
        db_settings = get_db_settings()
        _engine = create_async_engine(
            db_settings.database_url,
            echo=db_settings.echo,
            pool_pre_ping=db_settings.pool_pre_ping,
        )
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the session factory bound to the process-wide engine."""
    get_engine()
    assert _session_factory is not None
    return _session_factory


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Get async database session.

    Yields:
        Database session that is automatically closed.

    Example:
        async with get_async_session() as session:
            page = await RepositoryListingService(session).list_page(query)
    """
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_database(*, create_tables: bool | None = None) -> None:
    """Verify connectivity and optionally create missing tables.

    Args:
        create_tables: Override DB_CREATE_TABLES for this call.
    """
    db_settings = get_db_settings()
    if create_tables is None:
        create_tables = db_settings.create_tables

    engine = get_engine()
    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if create_tables:
                from repo_catalog.core.database.base import Base

                # Register models on Base.metadata
                import repo_catalog.features.commits.models  # noqa: F401
                import repo_catalog.features.repositories.models  # noqa: F401

                await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        logger.error(
            "Failed to connect to database",
            extra={"url": engine.url.render_as_string(hide_password=True), "error": str(e)},
        )
        raise

    logger.info(
        "Database connection established",
        extra={
            "url": engine.url.render_as_string(hide_password=True),
            "driver": "aiosqlite" if db_settings.is_sqlite else engine.url.drivername,
            "created_tables": create_tables,
        },
    )


async def close_database() -> None:
    """Dispose of the engine and its pool (application shutdown)."""
    global _engine, _session_factory
    if _engine is None:
        return
    logger.info("Closing database connection")
    await _engine.dispose()
    _engine = None
    _session_factory = None


__all__ = [
    "close_database",
    "get_async_session",
    "get_engine",
    "get_session_factory",
    "init_database",
]
