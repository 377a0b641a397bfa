"""Async iteration over cursor-paginated listings.

``CursorPager`` drives any page function that accepts a cursor and returns
an object exposing ``items``, ``next_cursor`` and ``has_more``. It keeps
requesting pages until storage reports no more rows.

A page may contain fewer items than its limit, or none at all, when the
listing filters rows after loading them. The pager still advances because
the next cursor always points past the last row read from storage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from repo_catalog.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable, Sequence

_lazy = get_lazy_logger(__name__)

T = TypeVar("T")


class PageLike(Protocol[T]):
    """Minimal shape of a page the pager can advance over."""

    @property
    def items(self) -> Sequence[T]: ...

    @property
    def next_cursor(self) -> str | None: ...

    @property
    def has_more(self) -> bool: ...


class CursorPager(Generic[T]):
    """Iterate every page of a cursor-paginated listing.

    Example:
        async def fetch(cursor: str | None) -> RepositoryPage:
            return await service.list_page(query, cursor=cursor, limit=50)

        async for page in CursorPager(fetch):
            for repository in page.items:
                ...

        # or, flattened
        repositories = [r async for r in CursorPager(fetch).items()]
    """

    def __init__(
        self,
        fetch_page: Callable[[str | None], Awaitable[PageLike[T]]],
        *,
        start_cursor: str | None = None,
        max_pages: int | None = None,
    ) -> None:
        """Initialize the pager.

        Args:
            fetch_page: Coroutine function returning the page after a cursor
            start_cursor: Cursor to resume from (None for the first page)
            max_pages: Stop after this many pages even if more exist
        """
        self._fetch_page = fetch_page
        self._start_cursor = start_cursor
        self._max_pages = max_pages

    async def __aiter__(self) -> AsyncIterator[PageLike[T]]:
        cursor = self._start_cursor
        pages = 0
        while True:
            page = await self._fetch_page(cursor)
            pages += 1
            _lazy.debug(
                lambda: f"pager: page {pages} has_more={page.has_more} next_cursor={page.next_cursor!r}"
            )
            yield page

            if not page.has_more or page.next_cursor is None:
                return
            if self._max_pages is not None and pages >= self._max_pages:
                return
            cursor = page.next_cursor

    async def items(self) -> AsyncIterator[T]:
        """Yield the items of every page in order."""
        async for page in self:
            for item in page.items:
                yield item


__all__ = ["CursorPager", "PageLike"]
