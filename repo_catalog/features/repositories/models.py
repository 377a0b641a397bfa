"""SQLAlchemy models for the repositories feature."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from repo_catalog.core.database import Base, TimestampedBase
from repo_catalog.core.database.exceptions import AttachmentNotLoadedError

if TYPE_CHECKING:
    from repo_catalog.features.commits.models import Commit

# Marks an attachment the current query did not ask for
_UNATTACHED: Any = object()


class Repository(TimestampedBase):
    """A hosted source repository.

    Besides its columns, a repository carries two optional attachments that
    listings fill in on request: ``commit_count`` and ``most_recent_commit``.
    Reading an attachment that was not requested raises
    ``AttachmentNotLoadedError`` so that "not requested" is never confused
    with "requested, empty".
    """

    __tablename__ = "repositories"

    phid: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        comment="Globally unique external identifier",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )
    callsign: Mapped[str | None] = mapped_column(
        String(32),
        nullable=True,
        unique=True,
        comment="Optional short human-readable alias",
    )
    details: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Free-form settings (tracking flag, VCS type, ...)",
    )

    _commit_count = _UNATTACHED
    _most_recent_commit = _UNATTACHED

    @property
    def is_tracked(self) -> bool:
        """Whether the repository is actively tracked (open)."""
        return bool((self.details or {}).get("tracking-enabled", False))

    @property
    def monogram(self) -> str:
        """Short reference, ``r<CALLSIGN>`` when a callsign exists."""
        if self.callsign:
            return f"r{self.callsign}"
        return f"R{self.id}"

    # Attachments

    @property
    def has_commit_count(self) -> bool:
        return self._commit_count is not _UNATTACHED

    @property
    def commit_count(self) -> int:
        if self._commit_count is _UNATTACHED:
            raise AttachmentNotLoadedError(type(self).__name__, "commit_count")
        return self._commit_count

    def attach_commit_count(self, count: int) -> None:
        self._commit_count = count

    @property
    def has_most_recent_commit(self) -> bool:
        return self._most_recent_commit is not _UNATTACHED

    @property
    def most_recent_commit(self) -> Commit | None:
        if self._most_recent_commit is _UNATTACHED:
            raise AttachmentNotLoadedError(type(self).__name__, "most_recent_commit")
        return self._most_recent_commit

    def attach_most_recent_commit(self, commit: Commit | None) -> None:
        self._most_recent_commit = commit

    def reset_attachments(self) -> None:
        """Forget attachments from an earlier load of this identity."""
        self._commit_count = _UNATTACHED
        self._most_recent_commit = _UNATTACHED

    def __repr__(self) -> str:
        """Return repository summary for debugging."""
        return f"<Repository(id={self.id}, callsign={self.callsign!r})>"


class RepositorySummary(Base):
    """Aggregate commit statistics for one repository.

    At most one row per repository. Repositories without a summary row have
    no imported commits yet.
    """

    __tablename__ = "repository_summary"

    repository_id: Mapped[int] = mapped_column(
        ForeignKey("repositories.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Summarized repository",
    )
    size: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Number of imported commits",
    )
    last_commit_id: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Id of the most recent commit",
    )
    epoch: Mapped[int | None] = mapped_column(
        BigInteger,
        nullable=True,
        comment="Time of the most recent commit",
    )

    def __repr__(self) -> str:
        return f"<RepositorySummary(repository_id={self.repository_id}, size={self.size})>"
