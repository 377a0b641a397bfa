"""Visibility policy applied to repository listings.

The listing only depends on this small interface; the real policy engine
lives elsewhere. ``AllowAllPolicy`` is the default and hides nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from repo_catalog.features.repositories.models import Repository


class VisibilityPolicy(Protocol):
    """Decides which loaded repositories a viewer may see."""

    async def filter_visible(
        self,
        viewer: Any,
        repositories: Sequence[Repository],
    ) -> list[Repository]:
        """Return the visible subset of ``repositories`` in the same order."""
        ...


class AllowAllPolicy:
    """Policy that lets every viewer see every repository."""

    async def filter_visible(
        self,
        viewer: Any,
        repositories: Sequence[Repository],
    ) -> list[Repository]:
        _ = viewer
        return list(repositories)


__all__ = ["AllowAllPolicy", "VisibilityPolicy"]
