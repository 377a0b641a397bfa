"""Post-load status filter for repository listings.

Whether a repository is open lives in its ``details`` JSON, so the status
filter runs in memory on each loaded page instead of in SQL. Pages can
therefore come back shorter than their limit; they are never refilled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from repo_catalog.core.database.exceptions import InvalidFilterValueError
from repo_catalog.features.repositories.query import RepositoryStatus
from repo_catalog.infra.metrics import repository_status_filtered_total

if TYPE_CHECKING:
    from collections.abc import Iterable

    from repo_catalog.features.repositories.models import Repository

logger = logging.getLogger(__name__)


def _parse_status(status: str) -> RepositoryStatus:
    try:
        return RepositoryStatus(status)
    except ValueError:
        logger.warning("Rejected unknown repository status", extra={"status": status})
        raise InvalidFilterValueError("status", status) from None


def matches_status(repository: Repository, status: str) -> bool:
    """Whether ``repository`` belongs in a listing filtered by ``status``.

    Raises:
        InvalidFilterValueError: If ``status`` is not a known status
    """
    parsed = _parse_status(status)
    if parsed is RepositoryStatus.OPEN:
        return repository.is_tracked
    if parsed is RepositoryStatus.CLOSED:
        return not repository.is_tracked
    return True


def filter_by_status(repositories: Iterable[Repository], status: str) -> list[Repository]:
    """Keep the repositories matching ``status``, preserving order.

    The status is validated before any repository is examined, so an
    unknown value fails even on an empty page.

    Raises:
        InvalidFilterValueError: If ``status`` is not a known status
    """
    parsed = _parse_status(status)
    candidates = list(repositories)
    if parsed is RepositoryStatus.ALL:
        return candidates

    kept = [repository for repository in candidates if matches_status(repository, parsed)]
    dropped = len(candidates) - len(kept)
    if dropped:
        repository_status_filtered_total.labels(status=parsed.value).inc(dropped)
    return kept


__all__ = ["filter_by_status", "matches_status"]
