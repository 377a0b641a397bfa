"""Cursor-based pagination utilities.

Keyset (seek) pagination keeps results stable while rows are inserted and
avoids the cost of large OFFSETs.

Components:
    - CursorCodec / CursorData: opaque cursor encoding
    - CursorFilter: applies ORDER BY key DESC, seek condition and LIMIT n + 1
    - CursorPage: REST response envelope
    - CursorPager: async iterator over successive pages

Usage:
    from repo_catalog.core.pagination import CursorFilter

    stmt = CursorFilter(cursor, Repository.id, limit=50).apply(select(Repository))
"""

from __future__ import annotations

from .cursor import CursorCodec, CursorData
from .filters import CursorFilter
from .pager import CursorPager, PageLike
from .schemas import CursorPage

__all__ = [
    "CursorCodec",
    "CursorData",
    "CursorFilter",
    "CursorPage",
    "CursorPager",
    "PageLike",
]
