"""Pydantic schemas for the repositories feature."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from repo_catalog.features.repositories.models import Repository


class CommitResponse(BaseModel):
    """Commit representation embedded in repository responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    commit_identifier: str
    epoch: int
    summary: str


class RepositoryResponse(BaseModel):
    """Representation returned from the API.

    ``commit_count`` and ``most_recent_commit`` are only present when the
    request asked for them. A requested most recent commit that does not
    exist is returned as ``null``.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    phid: str
    name: str
    callsign: str | None = None
    monogram: str
    is_tracked: bool
    created_at: datetime
    updated_at: datetime
    commit_count: int | None = Field(
        default=None,
        description="Number of imported commits (only when requested)",
    )
    most_recent_commit: CommitResponse | None = Field(
        default=None,
        description="Most recent commit (only when requested)",
    )

    @classmethod
    def from_repository(cls, repository: Repository) -> RepositoryResponse:
        """Build a response, setting attachment fields only when attached."""
        data: dict[str, Any] = {
            "id": repository.id,
            "phid": repository.phid,
            "name": repository.name,
            "callsign": repository.callsign,
            "monogram": repository.monogram,
            "is_tracked": repository.is_tracked,
            "created_at": repository.created_at,
            "updated_at": repository.updated_at,
        }
        if repository.has_commit_count:
            data["commit_count"] = repository.commit_count
        if repository.has_most_recent_commit:
            commit = repository.most_recent_commit
            data["most_recent_commit"] = (
                CommitResponse.model_validate(commit) if commit is not None else None
            )
        return cls(**data)


__all__ = ["CommitResponse", "RepositoryResponse"]
