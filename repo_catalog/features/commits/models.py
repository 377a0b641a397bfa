"""SQLAlchemy models for the commits feature."""

from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from repo_catalog.core.database import TimestampedBase


class Commit(TimestampedBase):
    """A single commit imported from a hosted repository.

    Commits are looked up in batches by id when listings ask for the most
    recent commit of each repository.
    """

    __tablename__ = "repository_commits"
    __table_args__ = (
        Index("ix_repository_commits_repository_epoch", "repository_id", "epoch"),
    )

    repository_id: Mapped[int] = mapped_column(
        ForeignKey("repositories.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning repository",
    )
    commit_identifier: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="VCS identifier (e.g., git hash)",
    )
    epoch: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Commit time as a Unix timestamp",
    )
    summary: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="First line of the commit message",
    )

    def __repr__(self) -> str:
        """Return commit summary for debugging."""
        return f"<Commit(id={self.id}, identifier={self.commit_identifier!r})>"
