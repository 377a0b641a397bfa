"""Database dependencies for FastAPI route handlers.

`get_db_session()` ties the session lifecycle to the HTTP request. For CLI
commands and scripts use `get_async_session()` from infra.database directly;
both share the same session factory.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from repo_catalog.infra.database import get_async_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency for database session.

    Yields:
        Database session that is automatically closed after request.

    Example:
        @router.get("/repositories/")
        async def list_repositories(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_async_session() as session:
        yield session
