"""Repository for the repositories feature.

``RepositoryRepository.load_page`` is the listing loader. One call runs
exactly one primary SELECT and, when most recent commits are requested,
at most one batched commit lookup:

1. run the statement built from the query (``limit + 1`` rows)
2. attach commit counts from the joined summary columns
3. collect the distinct last-commit ids of the page
4. fetch those commits in one call and attach them
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from repo_catalog.core.database.repository import BaseRepository
from repo_catalog.core.pagination import CursorCodec
from repo_catalog.features.commits.repository import get_commit_repository
from repo_catalog.features.repositories.clauses import KEYSET_COLUMN, build_statement
from repo_catalog.features.repositories.models import Repository
from repo_catalog.infra.metrics import (
    repository_commit_batch_lookups_total,
    repository_page_load_seconds,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.ext.asyncio import AsyncSession

    from repo_catalog.features.commits.repository import CommitLookup
    from repo_catalog.features.repositories.query import RepositoryQuery


@dataclass(frozen=True, slots=True)
class LoadedPage:
    """Result of loading one page from storage.

    Attributes:
        repositories: Loaded repositories in storage order, at most ``limit``
        has_more: Whether storage holds rows past this page
        last_row_cursor: Cursor after the last row read (None for an empty page)
    """

    repositories: list[Repository] = field(default_factory=list)
    has_more: bool = False
    last_row_cursor: str | None = None


def collect_commit_ids(rows: Iterable[Sequence[Any]]) -> set[int]:
    """Distinct non-null last-commit ids of the joined rows.

    Rows are ``(repository, size, last_commit_id)`` tuples.
    """
    return {row[2] for row in rows if row[2] is not None}


class RepositoryRepository(BaseRepository[Repository]):
    """Repository for Repository model.

    Inherits from BaseRepository:
        - list_by_ids(session, ids) -> Sequence[Repository]

    Feature-specific methods below.
    """

    def __init__(self, commit_lookup: CommitLookup | None = None) -> None:
        """Initialize with Repository model.

        Args:
            commit_lookup: Batched commit lookup (defaults to CommitRepository)
        """
        super().__init__(Repository)
        self._commit_lookup = commit_lookup or get_commit_repository()

    async def load_page(
        self,
        session: AsyncSession,
        query: RepositoryQuery,
        *,
        limit: int,
        cursor: str | None = None,
    ) -> LoadedPage:
        """Load one page of repositories with the requested attachments.

        Args:
            session: Database session
            query: Filters and attachment flags
            limit: Page size
            cursor: Cursor from a previous page (None for the first page)

        Returns:
            LoadedPage with repositories in newest-first order

        Raises:
            SQLAlchemyError: If the primary query fails. Errors from the commit
                lookup propagate unchanged. Nothing is retried and no partial
                page is returned.
        """
        joined = query.joins_summary
        start = time.perf_counter()

        statement = build_statement(query, cursor=cursor, limit=limit)
        try:
            result = await session.execute(statement)
            rows = result.all()
        except SQLAlchemyError:
            self._logger.exception(
                "Repository page query failed",
                extra={"operation": "db.load_page", "limit": limit, "joined_summary": joined},
            )
            raise

        has_more = len(rows) > limit
        rows = rows[:limit]
        repositories = [row[0] for row in rows]

        # The session identity map may hand back instances attached earlier
        for repository in repositories:
            repository.reset_attachments()

        if query.commit_counts:
            for repository, size, _ in rows:
                repository.attach_commit_count(size or 0)

        if query.most_recent_commits:
            await self._attach_most_recent_commits(session, rows)

        last_row_cursor = None
        if repositories:
            last_row_cursor = CursorCodec.create_cursor(repositories[-1], KEYSET_COLUMN.key)

        repository_page_load_seconds.labels(joined_summary=str(joined).lower()).observe(
            time.perf_counter() - start
        )
        self._lazy.debug(
            lambda: f"db.load_page(limit={limit}, cursor={cursor!r}, joined={joined}) "
            f"-> {len(repositories)} rows, has_more={has_more}"
        )
        return LoadedPage(
            repositories=repositories,
            has_more=has_more,
            last_row_cursor=last_row_cursor,
        )

    async def _attach_most_recent_commits(
        self,
        session: AsyncSession,
        rows: Sequence[Sequence[Any]],
    ) -> None:
        commit_ids = collect_commit_ids(rows)

        commits = {}
        if commit_ids:
            repository_commit_batch_lookups_total.inc()
            try:
                commits = await self._commit_lookup.fetch_by_ids(session, commit_ids)
            except Exception:
                self._logger.exception(
                    "Most recent commit lookup failed",
                    extra={"operation": "db.fetch_by_ids", "commit_ids": len(commit_ids)},
                )
                raise

        for repository, _, last_commit_id in rows:
            commit = commits.get(last_commit_id) if last_commit_id is not None else None
            repository.attach_most_recent_commit(commit)


# Factory function for dependency injection
_repository_repository: RepositoryRepository | None = None


def get_repository_repository() -> RepositoryRepository:
    """Get RepositoryRepository instance.

    Usage in FastAPI routes:
        @router.get("/")
        async def list_repositories(
            session: AsyncSession = Depends(get_db_session),
            repo: RepositoryRepository = Depends(get_repository_repository),
        ):
            return await repo.load_page(session, RepositoryQuery(), limit=50)
    """
    global _repository_repository
    if _repository_repository is None:
        _repository_repository = RepositoryRepository()
    return _repository_repository
