"""Application lifespan management.

Startup Order:
1. Logging
2. Database connectivity check (and optional table creation)

Shutdown Order: Reverse of startup
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from repo_catalog.core.settings import get_app_settings
from repo_catalog.infra.database import close_database, init_database
from repo_catalog.infra.logging.config import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop application services."""
    setup_logging()
    app_settings = get_app_settings()

    logger.info(
        "Starting application",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
        },
    )

    await init_database()

    try:
        yield
    finally:
        await close_database()
        logger.info("Application shutdown complete", extra={"service": app_settings.service_name})
