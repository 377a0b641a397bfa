"""Tests for the Prometheus metrics registry and endpoint."""

from __future__ import annotations

from prometheus_client import generate_latest

from repo_catalog.infra.metrics import (
    REGISTRY,
    repository_commit_batch_lookups_total,
    repository_page_load_seconds,
    repository_status_filtered_total,
)


def test_metrics_live_in_custom_registry():
    output = generate_latest(REGISTRY).decode()

    assert "repository_commit_batch_lookups_total" in output
    assert repository_page_load_seconds._labelnames == ("joined_summary",)
    assert repository_status_filtered_total._labelnames == ("status",)


def test_counter_increments():
    before = REGISTRY.get_sample_value("repository_commit_batch_lookups_total") or 0.0

    repository_commit_batch_lookups_total.inc()

    assert REGISTRY.get_sample_value("repository_commit_batch_lookups_total") == before + 1


async def test_metrics_endpoint(client):
    response = await client.get("/metrics")

    assert response.status_code == 200
    assert "repository_page_load_seconds" in response.text
