"""Cursor filter for SQLAlchemy queries.

The CursorFilter implements reverse keyset pagination on one unique column:
instead of OFFSET it seeks directly past the cursor, so pages stay stable
when rows are inserted between requests.

    ORDER BY id DESC with a cursor at id=40:
    WHERE id < 40 ORDER BY id DESC LIMIT n + 1
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from repo_catalog.core.database.filters import StatementFilter
from repo_catalog.core.pagination.cursor import CursorCodec

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.orm import InstrumentedAttribute

logger = logging.getLogger(__name__)


class CursorFilter(StatementFilter):
    """Apply keyset pagination to a SQLAlchemy query.

    The filter adds, in order:
    1. ORDER BY the keyset column, largest key first
    2. the seek condition past the cursor (if a cursor was given)
    3. LIMIT page size + 1, so the caller can detect whether more rows exist

    Example:
        stmt = CursorFilter(request_cursor, Repository.id, limit=50).apply(select(Repository))
    """

    def __init__(
        self,
        cursor: str | None,
        column: InstrumentedAttribute[Any],
        *,
        limit: int = 50,
    ) -> None:
        """Initialize cursor filter.

        Args:
            cursor: Encoded cursor string (None for first page)
            column: Unique column the listing is ordered by
            limit: Maximum items to return (page size)
        """
        self.column = column
        self.limit = limit
        self.position: int | None = None

        if cursor:
            try:
                data = CursorCodec.decode(cursor)
            except ValueError:
                # Invalid cursor, treat as first page
                logger.warning("Ignoring undecodable pagination cursor", extra={"cursor": cursor})
                return
            if data.field != column.key:
                logger.warning(
                    "Ignoring cursor taken from another column",
                    extra={"cursor_field": data.field, "column": column.key},
                )
                return
            self.position = data.value

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply ordering, the seek condition and the probe limit."""
        statement = statement.order_by(self.column.desc())
        if self.position is not None:
            statement = statement.where(self.column < self.position)

        # Fetch one extra to detect has_more
        return statement.limit(self.limit + 1)


__all__ = ["CursorFilter"]
