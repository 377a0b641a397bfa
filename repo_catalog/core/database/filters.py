"""Query filtering utilities for SQLAlchemy.

These filters work directly with SQLAlchemy statements without hiding the
query. Values always travel as bound parameters.

Usage:
    from sqlalchemy import select
    from repo_catalog.core.database.filters import CollectionFilter, FilterGroup

    stmt = select(Repository)
    stmt = CollectionFilter(Repository.id, [5, 9]).apply(stmt)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, false

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy.orm import InstrumentedAttribute


class StatementFilter(ABC):
    """Base class for statement filters.

    All filters implement `apply()` which modifies a SQLAlchemy statement.
    """

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply filter to statement.

        Args:
            statement: SQLAlchemy select statement

        Returns:
            Modified select statement
        """
        ...


class CollectionFilter(StatementFilter):
    """Filter by collection (WHERE ... IN).

    Example:
        stmt = CollectionFilter(Repository.id, [1, 2, 3]).apply(stmt)
        # WHERE repositories.id IN (?, ?, ?)
    """

    def __init__(
        self,
        field: InstrumentedAttribute[Any],
        values: Iterable[Any],
    ):
        """Initialize collection filter.

        Args:
            field: Field to filter
            values: Collection of values to match
        """
        self.field = field
        self.values = list(values)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply collection filter to statement."""
        if not self.values:
            # Empty collection - return statement that matches nothing
            return statement.where(false())

        return statement.where(self.field.in_(self.values))


class FilterGroup(StatementFilter):
    """Combine multiple filters conjunctively.

    Filters are applied in order, so each one adds its own WHERE criterion
    and SQLAlchemy joins them with AND.

    Example:
        filters = FilterGroup([
            CollectionFilter(Repository.id, [5, 9]),
            CollectionFilter(Repository.callsign, ["CORE"]),
        ])
        stmt = filters.apply(stmt)
    """

    def __init__(self, filters: Sequence[StatementFilter]):
        """Initialize filter group.

        Args:
            filters: Filters to combine
        """
        self.filters = list(filters)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply all filters to statement."""
        for filter_obj in self.filters:
            statement = filter_obj.apply(statement)
        return statement


__all__ = [
    "CollectionFilter",
    "FilterGroup",
    "StatementFilter",
]
