"""Tests for batched commit lookups."""

from __future__ import annotations

import pytest
from sqlalchemy import event

from repo_catalog.features.commits.repository import CommitRepository, get_commit_repository


@pytest.mark.asyncio
async def test_fetch_by_ids_maps_found_commits(db_session, make_repository, make_commit) -> None:
    await make_repository(1)
    await make_commit(10, 1)
    await make_commit(11, 1)
    repo = CommitRepository()

    found = await repo.fetch_by_ids(db_session, {10, 11, 12})

    assert sorted(found) == [10, 11]
    assert found[10].repository_id == 1


@pytest.mark.asyncio
async def test_fetch_by_ids_issues_one_query(db_engine, db_session, make_repository, make_commit) -> None:
    await make_repository(1)
    for commit_id in range(20, 30):
        await make_commit(commit_id, 1)
    statements: list[str] = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(db_engine.sync_engine, "before_cursor_execute", _capture)
    try:
        found = await CommitRepository().fetch_by_ids(db_session, set(range(20, 30)))
    finally:
        event.remove(db_engine.sync_engine, "before_cursor_execute", _capture)

    assert len(found) == 10
    assert len(statements) == 1
    assert "repository_commits.id IN" in statements[0]


@pytest.mark.asyncio
async def test_fetch_by_ids_empty(db_session) -> None:
    assert await CommitRepository().fetch_by_ids(db_session, set()) == {}


def test_factory_returns_singleton() -> None:
    assert get_commit_repository() is get_commit_repository()
