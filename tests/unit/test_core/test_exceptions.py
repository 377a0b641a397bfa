"""Unit tests for application and repository exceptions."""

from __future__ import annotations

import pytest

from repo_catalog.core.database.exceptions import (
    AttachmentNotLoadedError,
    InvalidFilterError,
    InvalidFilterValueError,
    RepositoryError,
)
from repo_catalog.core.exceptions import (
    AppException,
    BadRequestException,
    ServiceUnavailableException,
)


@pytest.mark.unit
class TestAppExceptions:
    def test_default_title_from_status(self):
        exc = AppException(status_code=404, detail="missing")

        assert exc.title == "Not Found"
        assert exc.type == "about:blank"
        assert exc.extra == {}

    def test_unknown_status_title(self):
        assert AppException(status_code=418, detail="teapot").title == "Error"

    def test_bad_request(self):
        exc = BadRequestException(detail="bad", extra={"value": "x"})

        assert exc.status_code == 400
        assert exc.type == "bad-request"
        assert exc.extra == {"value": "x"}
        assert str(exc) == "bad"

    def test_service_unavailable(self):
        exc = ServiceUnavailableException(detail="down")

        assert exc.status_code == 503
        assert exc.title == "Service Unavailable"


@pytest.mark.unit
class TestRepositoryExceptions:
    def test_invalid_filter_value_carries_value(self):
        exc = InvalidFilterValueError("status", "status-archived")

        assert isinstance(exc, InvalidFilterError)
        assert isinstance(exc, RepositoryError)
        assert exc.value == "status-archived"
        assert exc.filter_name == "status"
        assert exc.message == "Unknown status 'status-archived'"
        assert exc.details == {"filter": "status", "value": "status-archived"}

    def test_attachment_not_loaded(self):
        exc = AttachmentNotLoadedError("Repository", "commit_count")

        assert exc.attachment == "commit_count"
        assert "Repository.commit_count was not loaded" in str(exc)
