"""Minimal generic repository for SQLAlchemy models.

Provides batched primary-key lookups with explicit session passing.
For complex queries, use the session directly - this is a convenience, not a cage.

Example:
    from repo_catalog.core.database import BaseRepository
    from repo_catalog.features.commits.models import Commit

    class CommitRepository(BaseRepository[Commit]):
        '''Commit-specific queries beyond basic lookups.'''

    commits = await CommitRepository(Commit).list_by_ids(session, {11, 12})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import select

from repo_catalog.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Minimal generic repository.

    Provides:
        - list_by_ids(session, ids) -> Sequence[T]

    Session is always explicit - no hidden state.
    """

    __slots__ = ("model", "_logger", "_lazy")

    def __init__(self, model: type[T]) -> None:
        """Initialize repository with model class.

        Args:
            model: SQLAlchemy model class (e.g., Repository, Commit)
        """
        self.model = model
        # Standard logger for INFO/WARNING/ERROR
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        # Lazy logger for DEBUG (zero overhead when DEBUG disabled)
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def list_by_ids(
        self,
        session: AsyncSession,
        ids: Iterable[Any],
    ) -> Sequence[T]:
        """Load every entity whose primary key is in ``ids`` with one query.

        The ids are sent as bound parameters of a single ``IN`` clause.
        Missing ids are simply absent from the result; order is unspecified.
        """
        id_list = list(ids)
        if not id_list:
            return []

        stmt = select(self.model).where(self._pk_attr().in_(id_list))
        result = await session.execute(stmt)
        items = result.scalars().all()

        self._lazy.debug(
            lambda: f"db.list_by_ids: {self.model.__name__}({len(id_list)} ids) -> {len(items)} found"
        )
        return items

    def _pk_attr(self) -> InstrumentedAttribute[Any]:
        """Get the mapped primary key attribute of the model."""
        pk_column = sa_inspect(self.model).primary_key[0]
        return cast("InstrumentedAttribute[Any]", getattr(self.model, pk_column.key))


__all__ = ["BaseRepository"]
