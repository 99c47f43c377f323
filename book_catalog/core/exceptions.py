"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class DuplicateTitleError(AppException):
    """A book with the same title is already in the catalog."""

    def __init__(self, title: str):
        super().__init__(
            "Title must be unique",
            error_code="BAD_USER_INPUT",
            details={"field": "title", "title": title},
        )
        self.title = title
