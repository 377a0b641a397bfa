"""Pagination response schemas for cursor-based pagination."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class CursorPage(BaseModel, Generic[T]):
    """REST-style cursor pagination response.

    ``items`` may hold fewer entries than the requested limit even when
    ``has_more`` is true: listings that filter after loading can shorten a
    page. Clients should page on ``has_more``/``next_cursor``, never on
    ``len(items)``.

    Attributes:
        items: List of data items
        next_cursor: Cursor for the next page (None if no more)
        has_more: Whether more rows exist after this page
        limit: Page size that was requested from storage
    """

    items: list[T] = Field(
        default_factory=list,
        description="List of items",
    )
    next_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch next page",
    )
    has_more: bool = Field(
        default=False,
        description="Whether more items exist",
    )
    limit: int | None = Field(
        default=None,
        description="Requested page size",
    )


__all__ = ["CursorPage"]
