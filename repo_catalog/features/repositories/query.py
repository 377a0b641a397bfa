"""Immutable description of a repository listing query.

A ``RepositoryQuery`` says which repositories to list and which optional
attachments to load. It carries no session and no paging state, so one
instance can be shared between concurrent callers and reused for every
page of a listing.

Example:
    query = (
        RepositoryQuery()
        .with_ids([5, 9])
        .with_status(RepositoryStatus.OPEN)
        .need_commit_counts()
    )
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class RepositoryStatus(StrEnum):
    """Status values understood by the post-load status filter."""

    OPEN = "status-open"
    CLOSED = "status-closed"
    ALL = "status-all"


def _as_tuple(values: Any) -> tuple[Any, ...]:
    if values is None:
        return ()
    # A lone string is one value, not an iterable of characters
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return (values,)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class RepositoryQuery:
    """Filters and attachment flags for a repository listing.

    Fields are combined with AND; values inside one field with OR (an IN
    list). An empty field, or one set to None, does not constrain the
    listing.

    Attributes:
        ids: Repository ids to match
        phids: External identifiers to match
        callsigns: Callsigns to match
        status: One of ``RepositoryStatus``; validated when the filter runs
        commit_counts: Attach the commit count to each repository
        most_recent_commits: Attach the most recent commit to each repository
    """

    ids: tuple[int, ...] = ()
    phids: tuple[str, ...] = ()
    callsigns: tuple[str, ...] = ()
    status: str = RepositoryStatus.ALL
    commit_counts: bool = False
    most_recent_commits: bool = False

    def with_ids(self, ids: int | Iterable[int] | None) -> RepositoryQuery:
        return dataclasses.replace(self, ids=_as_tuple(ids))

    def with_phids(self, phids: str | Iterable[str] | None) -> RepositoryQuery:
        return dataclasses.replace(self, phids=_as_tuple(phids))

    def with_callsigns(self, callsigns: str | Iterable[str] | None) -> RepositoryQuery:
        return dataclasses.replace(self, callsigns=_as_tuple(callsigns))

    def with_status(self, status: str) -> RepositoryQuery:
        """Set the status filter.

        The value is not checked here; an unknown status is reported by the
        status filter when the query runs.
        """
        return dataclasses.replace(self, status=status)

    def need_commit_counts(self, need: bool = True) -> RepositoryQuery:
        return dataclasses.replace(self, commit_counts=need)

    def need_most_recent_commits(self, need: bool = True) -> RepositoryQuery:
        return dataclasses.replace(self, most_recent_commits=need)

    @property
    def joins_summary(self) -> bool:
        """Whether the listing must join the summary table."""
        return self.commit_counts or self.most_recent_commits


__all__ = ["RepositoryQuery", "RepositoryStatus"]
