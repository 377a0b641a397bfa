"""Integration tests for the repositories HTTP API."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from repo_catalog.features.repositories.service import RepositoryListingService

BASE_URL = "/api/v1/repositories/"


@pytest.mark.asyncio
async def test_lists_newest_first_without_attachments(client, make_repository) -> None:
    await make_repository(1, callsign="ONE")
    await make_repository(2, callsign="TWO")

    response = await client.get(BASE_URL)

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["items"]] == [2, 1]
    assert body["has_more"] is False
    assert body["items"][0]["monogram"] == "rTWO"
    assert "commit_count" not in body["items"][0]
    assert "most_recent_commit" not in body["items"][0]


@pytest.mark.asyncio
async def test_filters_and_commit_counts(client, make_repository) -> None:
    await make_repository(5, tracked=True, size=3)
    await make_repository(9, tracked=False, size=0)

    response = await client.get(
        BASE_URL,
        params={
            "ids": [5, 9],
            "status": "status-open",
            "need_commit_counts": "true",
        },
    )

    assert response.status_code == 200
    items = response.json()["items"]
    assert [(item["id"], item["commit_count"]) for item in items] == [(5, 3)]


@pytest.mark.asyncio
async def test_most_recent_commit_null_when_requested_but_missing(
    client, make_repository, make_commit
) -> None:
    await make_repository(1, size=1, last_commit_id=10)
    await make_repository(2)
    await make_commit(10, 1, summary="Add README")

    response = await client.get(BASE_URL, params={"need_most_recent_commits": "true"})

    items = {item["id"]: item for item in response.json()["items"]}
    assert items[2]["most_recent_commit"] is None
    assert items[1]["most_recent_commit"]["summary"] == "Add README"
    assert "commit_count" not in items[1]


@pytest.mark.asyncio
async def test_cursor_paging(client, make_repository) -> None:
    for repository_id in (1, 2, 3):
        await make_repository(repository_id)

    first = (await client.get(BASE_URL, params={"limit": 2})).json()
    second = (await client.get(BASE_URL, params={"limit": 2, "cursor": first["next_cursor"]})).json()

    assert [item["id"] for item in first["items"]] == [3, 2]
    assert first["has_more"] is True
    assert first["limit"] == 2
    assert [item["id"] for item in second["items"]] == [1]
    assert second["has_more"] is False
    assert second["next_cursor"] is None


@pytest.mark.asyncio
async def test_unknown_status_is_bad_request(client, make_repository) -> None:
    await make_repository(1)

    response = await client.get(BASE_URL, params={"status": "status-archived"})

    assert response.status_code == 400
    body = response.json()
    assert body["type"] == "invalid-filter-value"
    assert body["title"] == "Bad Request"
    assert body["filter"] == "status"
    assert body["value"] == "status-archived"
    assert "request_id" in body
    assert response.headers["X-Request-ID"] == body["request_id"]


@pytest.mark.asyncio
async def test_invalid_limit_is_validation_error(client) -> None:
    response = await client.get(BASE_URL, params={"limit": 0})

    assert response.status_code == 422
    body = response.json()
    assert body["type"] == "validation-error"
    assert body["errors"][0]["field"] == "query.limit"


@pytest.mark.asyncio
async def test_storage_failure_is_service_unavailable(client, monkeypatch) -> None:
    async def _fail(self, query, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(RepositoryListingService, "list_page", _fail)

    response = await client.get(BASE_URL, headers={"X-Request-ID": "req-123"})

    assert response.status_code == 503
    body = response.json()
    assert body["type"] == "storage-unavailable"
    assert body["title"] == "Service Unavailable"
    assert body["status"] == 503
    assert body["request_id"] == "req-123"
    assert "database is locked" not in body["detail"]
