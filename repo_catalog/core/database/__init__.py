"""Core database package with base classes, filters and repository.

Base Classes and Mixins:
    - Base: Declarative base with a shared naming convention
    - IntegerPKMixin: Auto-increment integer primary key
    - TimestampMixin: created_at, updated_at tracking
    - TimestampedBase: Integer PK + timestamps

Repository:
    - BaseRepository[T]: Generic lookups with explicit session passing

Query Filters:
    - StatementFilter: Base class for composable statement filters
    - CollectionFilter: WHERE ... IN clauses
    - FilterGroup: Combine multiple filters

Exceptions:
    - RepositoryError and its subclasses
"""

from __future__ import annotations

from .base import NAMING_CONVENTION, Base, IntegerPKMixin, TimestampedBase, TimestampMixin
from .exceptions import (
    AttachmentNotLoadedError,
    InvalidFilterError,
    InvalidFilterValueError,
    RepositoryError,
)
from .filters import CollectionFilter, FilterGroup, StatementFilter
from .repository import BaseRepository

__all__ = [
    "NAMING_CONVENTION",
    "AttachmentNotLoadedError",
    "Base",
    "BaseRepository",
    "CollectionFilter",
    "FilterGroup",
    "IntegerPKMixin",
    "InvalidFilterError",
    "InvalidFilterValueError",
    "RepositoryError",
    "StatementFilter",
    "TimestampMixin",
    "TimestampedBase",
]
