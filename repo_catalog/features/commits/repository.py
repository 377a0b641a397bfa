"""Repository for the commits feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from repo_catalog.core.database.repository import BaseRepository
from repo_catalog.features.commits.models import Commit

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from sqlalchemy.ext.asyncio import AsyncSession


class CommitLookup(Protocol):
    """Anything that can resolve a batch of commit ids in one call."""

    async def fetch_by_ids(
        self,
        session: AsyncSession,
        ids: Collection[int],
    ) -> Mapping[int, Commit]:
        """Return the commits found for ``ids``, keyed by commit id."""
        ...


class CommitRepository(BaseRepository[Commit]):
    """Repository for Commit model.

    Inherits from BaseRepository:
        - list_by_ids(session, ids) -> Sequence[Commit]
    """

    def __init__(self) -> None:
        """Initialize with Commit model."""
        super().__init__(Commit)

    async def fetch_by_ids(
        self,
        session: AsyncSession,
        ids: Collection[int],
    ) -> dict[int, Commit]:
        """Batch load commits by id.

        Issues a single ``SELECT ... WHERE id IN (...)`` regardless of how
        many ids are requested. Ids without a matching row are absent from
        the result.

        Args:
            session: Database session
            ids: Commit ids to load

        Returns:
            Mapping of commit id to Commit
        """
        commits = await self.list_by_ids(session, ids)
        by_id = {commit.id: commit for commit in commits}

        self._lazy.debug(lambda: f"db.fetch_by_ids: requested={len(ids)} found={len(by_id)}")
        return by_id


# Factory function for dependency injection
_commit_repository: CommitRepository | None = None


def get_commit_repository() -> CommitRepository:
    """Get CommitRepository instance."""
    global _commit_repository
    if _commit_repository is None:
        _commit_repository = CommitRepository()
    return _commit_repository
