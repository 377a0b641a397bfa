"""Cursor encoding and decoding for pagination.

A cursor is an opaque string naming the keyset column and the key of the
last row already read from storage. The next page seeks strictly past it.

Example cursor payload (before URL-safe base64):
    {"field":"id","value":42}
"""

from __future__ import annotations

import base64
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CursorData(BaseModel):
    """Decoded cursor position.

    Attributes:
        field: Name of the keyset column the cursor was taken from
        value: Key of the last row already returned
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1, description="Keyset column name")
    value: int = Field(description="Key of the last row read")


class CursorCodec:
    """Encode and decode pagination cursors.

    Usage:
        cursor = CursorCodec.create_cursor(repository, "id")
        CursorCodec.decode(cursor).value  # repository.id
    """

    @staticmethod
    def encode(data: CursorData) -> str:
        """Encode cursor data to a URL-safe string."""
        return base64.urlsafe_b64encode(data.model_dump_json().encode()).decode()

    @staticmethod
    def decode(cursor: str) -> CursorData:
        """Decode a cursor string.

        Raises:
            ValueError: If the cursor is not valid base64 or does not hold
                a field name and an integer key
        """
        try:
            return CursorData.model_validate_json(base64.urlsafe_b64decode(cursor.encode()))
        except ValueError as e:
            # binascii.Error, UnicodeError and ValidationError all land here
            raise ValueError(f"Invalid cursor: {e}") from e

    @staticmethod
    def create_cursor(row: Any, field: str) -> str:
        """Create a cursor pointing past ``row``."""
        return CursorCodec.encode(CursorData(field=field, value=getattr(row, field)))


__all__ = ["CursorCodec", "CursorData"]
