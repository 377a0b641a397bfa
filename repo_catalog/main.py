"""Entry point for running the service with uvicorn.

Usage:
    uvicorn repo_catalog.main:app
    repo-catalog            # console script, binds APP_HOST:APP_PORT
"""

from __future__ import annotations

import uvicorn

from repo_catalog.app.main import create_app
from repo_catalog.core.settings import get_app_settings

# Application instance for uvicorn
app = create_app()


def run() -> None:
    """Run the API server."""
    settings = get_app_settings()
    uvicorn.run(
        "repo_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    run()
