"""Service layer for the repositories feature."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from repo_catalog.core.database.exceptions import InvalidFilterValueError
from repo_catalog.core.pagination import CursorPager
from repo_catalog.core.settings import get_pagination_settings
from repo_catalog.features.repositories.policy import AllowAllPolicy
from repo_catalog.features.repositories.repository import (
    RepositoryRepository,
    get_repository_repository,
)
from repo_catalog.features.repositories.status import filter_by_status
from repo_catalog.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from repo_catalog.features.repositories.models import Repository
    from repo_catalog.features.repositories.policy import VisibilityPolicy
    from repo_catalog.features.repositories.query import RepositoryQuery


# Standard logger for INFO/WARNING/ERROR
logger = logging.getLogger(__name__)
# Lazy logger for DEBUG (zero overhead when DEBUG disabled)
lazy_logger = get_lazy_logger(__name__)


@dataclass(slots=True)
class RepositoryPage:
    """One page of a repository listing.

    ``items`` can be shorter than ``limit`` (even empty) while ``has_more``
    is true, because the status filter and the visibility policy run after
    the rows were loaded. Use ``has_more`` and ``next_cursor`` to page.

    Attributes:
        items: Repositories that survived filtering, newest first
        next_cursor: Cursor for the following page (None on the last page)
        has_more: Whether storage holds rows past this page
        raw_count: Rows read from storage before post-load filtering
        limit: Effective page size
    """

    items: list[Repository] = field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False
    raw_count: int = 0
    limit: int = 0


class RepositoryListingService:
    """Service for repository listings.

    Handles:
    - Page size defaults and caps
    - Loading a page with the requested attachments
    - The post-load status filter and the visibility policy
    - Next-cursor computation
    """

    def __init__(
        self,
        session: AsyncSession,
        repo: RepositoryRepository | None = None,
        policy: VisibilityPolicy | None = None,
    ) -> None:
        """Initialize the listing service.

        Args:
            session: Database session for operations
            repo: Repository repository (optional, uses default if not provided)
            policy: Visibility policy (optional, allows everything by default)
        """
        self._session = session
        self._repo = repo or get_repository_repository()
        self._policy = policy or AllowAllPolicy()

    def _resolve_limit(self, limit: int | None) -> int:
        settings = get_pagination_settings()
        if limit is None:
            return settings.cursor_page_size
        if limit < 1:
            raise InvalidFilterValueError("limit", limit)
        return min(limit, settings.max_limit)

    async def list_page(
        self,
        query: RepositoryQuery,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        viewer: Any = None,
    ) -> RepositoryPage:
        """List one page of repositories.

        Args:
            query: Filters and attachment flags
            limit: Page size (defaults to the configured page size, capped)
            cursor: Cursor returned by the previous page
            viewer: Principal handed to the visibility policy

        Returns:
            RepositoryPage

        Raises:
            InvalidFilterValueError: If the status or limit is invalid
            SQLAlchemyError: If storage fails
        """
        effective_limit = self._resolve_limit(limit)

        loaded = await self._repo.load_page(
            self._session,
            query,
            limit=effective_limit,
            cursor=cursor,
        )
        items = filter_by_status(loaded.repositories, query.status)
        items = await self._policy.filter_visible(viewer, items)

        page = RepositoryPage(
            items=items,
            next_cursor=loaded.last_row_cursor if loaded.has_more else None,
            has_more=loaded.has_more,
            raw_count=len(loaded.repositories),
            limit=effective_limit,
        )
        lazy_logger.debug(
            lambda: f"service.list_page(status={query.status!r}, limit={effective_limit}) "
            f"-> {len(page.items)}/{page.raw_count} items, has_more={page.has_more}"
        )
        return page

    def iter_pages(
        self,
        query: RepositoryQuery,
        *,
        limit: int | None = None,
        viewer: Any = None,
        max_pages: int | None = None,
    ) -> CursorPager[Repository]:
        """Iterate every page of a listing.

        Example:
            async for page in service.iter_pages(query, limit=100):
                for repository in page.items:
                    ...
        """

        async def fetch(cursor: str | None) -> RepositoryPage:
            return await self.list_page(query, limit=limit, cursor=cursor, viewer=viewer)

        return CursorPager(fetch, max_pages=max_pages)


__all__ = ["RepositoryListingService", "RepositoryPage"]
