"""Modular Pydantic Settings v2 configuration.

One settings class per concern, each with its own environment prefix
(APP_, DB_, LOG_, PAGINATION_), frozen after validation and cached by
the loaders in ``loader.py``.

Import settings via cached loaders:
    from repo_catalog.core.settings import get_db_settings

    settings = get_db_settings()
    print(settings.database_url)
"""

from __future__ import annotations

from .app import AppSettings
from .database import DatabaseSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_db_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "AppSettings",
    "DatabaseSettings",
    "LoggingSettings",
    "PaginationSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_db_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
