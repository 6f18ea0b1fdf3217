"""Custom exceptions for diff operations."""

from typing import Any


class DiffError(Exception):
    """Base exception for diff operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class DiffParseError(DiffError):
    """Raised when unified diff text can't be parsed."""


class MalformedLineError(DiffError):
    """
    Raised when a hunk line has no recognised prefix character.

    This means whatever produced the hunk is broken; the hunk can't be displayed.
    """


class InvalidRangeError(DiffError):
    """Raised when a line range doesn't select a non-empty slice of a hunk."""
