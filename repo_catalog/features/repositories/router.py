"""API router for the repositories feature.

Endpoints:
    GET /repositories/ - List repositories, newest first, with cursor paging

Example Usage:
    # Open repositories among two ids, with commit counts
    GET /repositories/?ids=5&ids=9&status=status-open&need_commit_counts=true

    # Next page
    GET /repositories/?cursor=eyJ2Ijp7ImlkIjo0MH0sImQiOiJmb3J3YXJkIn0=

Pages may hold fewer items than ``limit`` because the status filter runs
after loading. Keep paging while ``has_more`` is true.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from repo_catalog.core.database import InvalidFilterValueError
from repo_catalog.core.dependencies.database import get_db_session
from repo_catalog.core.exceptions import BadRequestException
from repo_catalog.core.pagination import CursorPage
from repo_catalog.features.repositories.query import RepositoryQuery, RepositoryStatus
from repo_catalog.features.repositories.schemas import RepositoryResponse
from repo_catalog.features.repositories.service import RepositoryListingService

router = APIRouter(prefix="/repositories", tags=["repositories"])
logger = logging.getLogger(__name__)


@router.get(
    "/",
    response_model=CursorPage[RepositoryResponse],
    response_model_exclude_unset=True,
    summary="List repositories",
    description="Return repositories newest first, filtered by id, PHID, callsign and status.",
    responses={400: {"description": "Unknown filter value"}},
)
async def list_repositories(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    ids: Annotated[list[int] | None, Query(description="Repository ids")] = None,
    phids: Annotated[list[str] | None, Query(description="Repository PHIDs")] = None,
    callsigns: Annotated[list[str] | None, Query(description="Repository callsigns")] = None,
    status: Annotated[
        str,
        Query(description="status-open, status-closed or status-all"),
    ] = RepositoryStatus.ALL.value,
    need_commit_counts: bool = False,
    need_most_recent_commits: bool = False,
    limit: Annotated[int | None, Query(ge=1, description="Page size")] = None,
    cursor: Annotated[str | None, Query(description="Cursor from the previous page")] = None,
) -> CursorPage[RepositoryResponse]:
    """List one page of repositories.

    Args:
        session: Database session
        ids: Restrict to these ids
        phids: Restrict to these PHIDs
        callsigns: Restrict to these callsigns
        status: Post-load status filter
        need_commit_counts: Include ``commit_count``
        need_most_recent_commits: Include ``most_recent_commit``
        limit: Page size
        cursor: Cursor returned by the previous page

    Returns:
        Page of repositories
    """
    query = (
        RepositoryQuery()
        .with_ids(ids or ())
        .with_phids(phids or ())
        .with_callsigns(callsigns or ())
        .with_status(status)
        .need_commit_counts(need_commit_counts)
        .need_most_recent_commits(need_most_recent_commits)
    )

    service = RepositoryListingService(session)
    try:
        page = await service.list_page(query, limit=limit, cursor=cursor)
    except InvalidFilterValueError as exc:
        raise BadRequestException(
            detail=exc.message,
            type="invalid-filter-value",
            extra={"filter": exc.filter_name, "value": exc.value},
        ) from exc

    return CursorPage[RepositoryResponse](
        items=[RepositoryResponse.from_repository(repository) for repository in page.items],
        next_cursor=page.next_cursor,
        has_more=page.has_more,
        limit=page.limit,
    )
