"""Error types raised by the service layer.

Each error carries the HTTP status it maps to, so the exception handlers can
render it without knowing about individual services.
"""

from __future__ import annotations


class ApiException(Exception):
    """Base error for all business rule violations surfaced through the API."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ApiException):
    """Raised when a referenced resource does not exist."""

    status_code = 404


class ConflictError(ApiException):
    """Raised when a request clashes with the current state of a resource."""

    status_code = 409


class BadRequestError(ApiException):
    """Raised when a request is well-formed but cannot be honoured as given."""

    status_code = 400
