"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from repo_catalog.core.settings import get_app_settings
from repo_catalog.features.metrics.router import router as metrics_router
from repo_catalog.features.repositories.router import router as repositories_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from repo_catalog.core.settings.app import AppSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, app_settings: AppSettings | None = None) -> None:
    """Register all feature routers with the application.

    Args:
        app: FastAPI application instance.
        app_settings: Optional application settings override for the API prefix.
    """
    app_settings = app_settings or get_app_settings()
    api_prefix = app_settings.api_prefix

    # Include metrics endpoint (no prefix - accessible at /metrics)
    app.include_router(metrics_router)

    app.include_router(repositories_router, prefix=api_prefix)
    logger.info("Repository routes registered at %s/repositories", api_prefix)
