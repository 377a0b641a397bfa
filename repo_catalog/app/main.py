"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from repo_catalog.app.exception_handlers import configure_exception_handlers
from repo_catalog.app.lifespan import lifespan
from repo_catalog.app.middleware import configure_middleware
from repo_catalog.app.router import setup_routers
from repo_catalog.core.settings import get_app_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Settings are loaded once and cached via LRU cache.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    # Configure exception handlers (must be before middleware)
    configure_exception_handlers(app)

    configure_middleware(app)

    setup_routers(app, app_settings)

    return app
