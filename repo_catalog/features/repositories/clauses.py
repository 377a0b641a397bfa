"""Statement builders for repository listings.

Each builder takes a ``Select`` and returns a new one, so they compose in a
fixed order: join, field predicates, then ordering, the cursor seek
predicate and the limit. Every value travels as a bound parameter.

Example:
    stmt = build_statement(RepositoryQuery().with_ids([5, 9]), cursor=None, limit=50)
    # SELECT repositories.* FROM repositories
    # WHERE repositories.id IN (?, ?) ORDER BY repositories.id DESC LIMIT ?
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, select

from repo_catalog.core.database.filters import CollectionFilter, FilterGroup, StatementFilter
from repo_catalog.core.pagination import CursorFilter
from repo_catalog.features.repositories.models import Repository, RepositorySummary

if TYPE_CHECKING:
    from repo_catalog.features.repositories.query import RepositoryQuery

# Newest first; the cursor seeks to strictly smaller ids
KEYSET_COLUMN = Repository.id


def build_join(statement: Select[Any], query: RepositoryQuery) -> Select[Any]:
    """Left join the summary table when an attachment needs it.

    Repositories without a summary row are kept; their summary columns come
    back as NULL.
    """
    if not query.joins_summary:
        return statement

    return statement.add_columns(
        RepositorySummary.size,
        RepositorySummary.last_commit_id,
    ).outerjoin(
        RepositorySummary,
        RepositorySummary.repository_id == Repository.id,
    )


def build_where(statement: Select[Any], query: RepositoryQuery) -> Select[Any]:
    """Add one IN predicate per populated identifier field."""
    filters: list[StatementFilter] = []
    if query.ids:
        filters.append(CollectionFilter(Repository.id, query.ids))
    if query.phids:
        filters.append(CollectionFilter(Repository.phid, query.phids))
    if query.callsigns:
        filters.append(CollectionFilter(Repository.callsign, query.callsigns))

    return FilterGroup(filters).apply(statement)


def build_order_limit(
    statement: Select[Any],
    cursor: str | None,
    limit: int,
) -> Select[Any]:
    """Order newest first, seek past ``cursor`` and fetch ``limit + 1`` rows."""
    return CursorFilter(cursor, KEYSET_COLUMN, limit=limit).apply(statement)


def build_statement(
    query: RepositoryQuery,
    *,
    cursor: str | None = None,
    limit: int,
) -> Select[Any]:
    """Build the single primary statement for one page of ``query``."""
    statement = select(Repository)
    statement = build_join(statement, query)
    statement = build_where(statement, query)
    return build_order_limit(statement, cursor, limit)


__all__ = [
    "KEYSET_COLUMN",
    "build_join",
    "build_order_limit",
    "build_statement",
    "build_where",
]
