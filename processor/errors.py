"""Exceptions raised while reading the meeting feed."""
from typing import Optional


class MeetingFeedError(Exception):
    """Base error for meeting feed problems."""


class StructuralFieldMissing(MeetingFeedError, KeyError):
    """A required field is absent from a feed row."""

    def __init__(self, field_name: str, row_index: Optional[int] = None):
        self.field_name = field_name
        self.row_index = row_index
        if row_index is None:
            message = f"Missing required field: {field_name}"
        else:
            message = f"Row {row_index + 2}: missing required field: {field_name}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message
        return self.args[0]
