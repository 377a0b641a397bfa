"""Metrics infrastructure (Prometheus)."""

from repo_catalog.infra.metrics.prometheus import (
    REGISTRY,
    repository_commit_batch_lookups_total,
    repository_page_load_seconds,
    repository_status_filtered_total,
)

__all__ = [
    "REGISTRY",
    "repository_commit_batch_lookups_total",
    "repository_page_load_seconds",
    "repository_status_filtered_total",
]
