"""Commits feature: commit records and batched lookups by id."""

from __future__ import annotations

from .models import Commit
from .repository import CommitLookup, CommitRepository, get_commit_repository

__all__ = [
    "Commit",
    "CommitLookup",
    "CommitRepository",
    "get_commit_repository",
]
