"""Prometheus metrics for repository listing queries."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

# Custom registry so tests and multiple app instances don't collide on the default one
REGISTRY = CollectorRegistry()

# Covers query times from 1ms to 10s
DEFAULT_LATENCY_BUCKETS = (
    0.001,
    0.005,
    0.01,
    0.025,
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
)

repository_page_load_seconds = Histogram(
    "repository_page_load_seconds",
    "Time spent loading one page of repositories (primary plus batched lookups)",
    ["joined_summary"],
    buckets=DEFAULT_LATENCY_BUCKETS,
    registry=REGISTRY,
)

repository_commit_batch_lookups_total = Counter(
    "repository_commit_batch_lookups_total",
    "Batched most-recent-commit lookups issued by repository listings",
    registry=REGISTRY,
)

repository_status_filtered_total = Counter(
    "repository_status_filtered_total",
    "Repositories dropped by the post-load status filter",
    ["status"],
    registry=REGISTRY,
)
