"""Pagination settings for repository listings.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_CURSOR_PAGE_SIZE=50, PAGINATION_MAX_LIMIT=100
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        cursor_page_size: Default page size for cursor-based listings.
        max_limit: Maximum allowed items per page (hard limit).

    Example:
        settings = PaginationSettings()
        limit = min(requested_limit, settings.max_limit)
    """

    cursor_page_size: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Default page size for cursor-based pagination",
    )
    max_limit: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Maximum allowed page size (hard limit)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
