"""Pytest configuration and shared fixtures.

Organization:
    - Application Fixtures: FastAPI app and HTTP client
    - Database Fixtures: SQLAlchemy engine and session
    - Data Fixtures: helpers that persist repositories, summaries and commits
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING, Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from repo_catalog.features.commits.models import Commit
    from repo_catalog.features.repositories.models import Repository

# Ensure tests run without external infrastructure
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_JSON", "false")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload settings for every test so monkeypatched env vars take effect."""
    from repo_catalog.core.settings import clear_all_caches

    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create async SQLAlchemy engine with in-memory SQLite.

    Yields:
        Async SQLAlchemy engine connected to in-memory SQLite.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create async database session with automatic table creation and cleanup.

    This fixture:
    1. Creates all tables defined in Base.metadata
    2. Provides a session for database operations
    3. Rolls back after each test
    4. Drops the tables

    Yields:
        Async database session for testing.
    """
    from repo_catalog.core.database.base import Base
    from repo_catalog.features.commits.models import Commit  # noqa: F401
    from repo_catalog.features.repositories.models import Repository  # noqa: F401

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
async def app(db_session: AsyncSession):
    """Create FastAPI application wired to the test session.

    The lifespan does not run under ASGITransport, so no engine is created
    from settings; every request uses ``db_session``.
    """
    from repo_catalog.app.main import create_app
    from repo_catalog.core.dependencies.database import get_db_session

    application = create_app()

    async def _override_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    application.dependency_overrides[get_db_session] = _override_session
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing.

    Example:
        async def test_list(client):
            response = await client.get("/api/v1/repositories/")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def make_repository(db_session: AsyncSession):
    """Persist a repository, optionally with a summary row.

    Example:
        repo = await make_repository(5, tracked=True, size=3)
    """
    from repo_catalog.features.repositories.models import Repository, RepositorySummary

    async def _make(
        repository_id: int,
        *,
        tracked: bool = True,
        callsign: str | None = None,
        size: int | None = None,
        last_commit_id: int | None = None,
        **details: Any,
    ) -> Repository:
        repository = Repository(
            id=repository_id,
            phid=f"PHID-REPO-{repository_id:04d}",
            name=f"repo-{repository_id}",
            callsign=callsign,
            details={"tracking-enabled": tracked, **details},
        )
        db_session.add(repository)
        await db_session.flush()
        if size is not None or last_commit_id is not None:
            db_session.add(
                RepositorySummary(
                    repository_id=repository_id,
                    size=size or 0,
                    last_commit_id=last_commit_id,
                )
            )
        await db_session.commit()
        return repository

    return _make


@pytest.fixture
def make_commit(db_session: AsyncSession):
    """Persist a commit for an existing repository."""
    from repo_catalog.features.commits.models import Commit

    async def _make(
        commit_id: int,
        repository_id: int,
        *,
        epoch: int = 1_700_000_000,
        summary: str = "Initial commit",
    ) -> Commit:
        commit = Commit(
            id=commit_id,
            repository_id=repository_id,
            commit_identifier=f"{commit_id:040x}",
            epoch=epoch,
            summary=summary,
        )
        db_session.add(commit)
        await db_session.commit()
        return commit

    return _make
