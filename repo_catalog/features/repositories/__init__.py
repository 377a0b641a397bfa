"""Repositories feature: filtered, cursor-paginated repository listings."""

from __future__ import annotations

from .models import Repository, RepositorySummary
from .policy import AllowAllPolicy, VisibilityPolicy
from .query import RepositoryQuery, RepositoryStatus
from .repository import LoadedPage, RepositoryRepository, collect_commit_ids, get_repository_repository
from .schemas import CommitResponse, RepositoryResponse
from .service import RepositoryListingService, RepositoryPage
from .status import filter_by_status, matches_status

__all__ = [
    "AllowAllPolicy",
    "CommitResponse",
    "LoadedPage",
    "Repository",
    "RepositoryListingService",
    "RepositoryPage",
    "RepositoryQuery",
    "RepositoryRepository",
    "RepositoryResponse",
    "RepositoryStatus",
    "RepositorySummary",
    "VisibilityPolicy",
    "collect_commit_ids",
    "filter_by_status",
    "get_repository_repository",
    "matches_status",
]
