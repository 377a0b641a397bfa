"""Database repository exceptions.

Custom exceptions for repository operations that provide better
error messages and typing than raw SQLAlchemy exceptions. Storage
failures themselves are not wrapped: ``sqlalchemy.exc.SQLAlchemyError``
propagates to the caller unchanged.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """Base exception for repository operations.

    Raised when a repository operation fails due to programming
    errors, configuration issues, or unexpected states.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize repository error.

        Args:
            message: Error description
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Format error message with details."""
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidFilterError(RepositoryError):
    """Invalid filter or query parameters.

    Raised when filter parameters are malformed, reference non-existent
    fields, or contain invalid values.
    """

    def __init__(self, message: str, filter_name: str | None = None):
        """Initialize invalid filter error.

        Args:
            message: Error description
            filter_name: Name of the problematic filter (if applicable)
        """
        details = {"filter": filter_name} if filter_name else {}
        super().__init__(message, details=details)
        self.filter_name = filter_name


class InvalidFilterValueError(InvalidFilterError):
    """A filter was given a value outside its allowed set.

    This is a programming error on the caller's side and is never retried.

    Attributes:
        value: The offending value, unchanged
    """

    def __init__(self, filter_name: str, value: Any):
        """Initialize invalid filter value error.

        Args:
            filter_name: Name of the filter (e.g., "status")
            value: The unrecognized value
        """
        super().__init__(f"Unknown {filter_name} {value!r}", filter_name=filter_name)
        self.value = value
        self.details["value"] = value


class AttachmentNotLoadedError(RepositoryError):
    """An optional attachment was read before it was attached.

    Attachments such as commit counts are only populated when the query
    asked for them; reading one that was not requested is a caller bug.
    """

    def __init__(self, model_name: str, attachment: str):
        """Initialize attachment error.

        Args:
            model_name: Name of the model the attachment belongs to
            attachment: Attachment name (e.g., "commit_count")
        """
        super().__init__(
            f"{model_name}.{attachment} was not loaded; request it on the query first",
            details={"model": model_name, "attachment": attachment},
        )
        self.attachment = attachment


__all__ = [
    "AttachmentNotLoadedError",
    "InvalidFilterError",
    "InvalidFilterValueError",
    "RepositoryError",
]
