"""
Error response I/O models.

Every error produced by the API is rendered with the same ``ApiError`` body,
so clients can rely on ``status``, ``error`` and ``message`` being present.
"""

from __future__ import annotations

from datetime import datetime, timezone
from http import HTTPStatus
from typing import List, Optional

from pydantic import BaseModel, Field


class FieldViolation(BaseModel):
    """A single failed validation constraint."""

    field: str
    message: str


class ApiError(BaseModel):
    """Uniform error body."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    message: str
    path: str
    violations: Optional[List[FieldViolation]] = None

    @classmethod
    def build(
        cls, status: int, message: str, path: str, violations: Optional[List[FieldViolation]] = None
    ) -> "ApiError":
        """Create an error body, filling ``error`` with the status' reason phrase."""
        return cls(
            status=status,
            error=HTTPStatus(status).phrase,
            message=message,
            path=path,
            violations=violations,
        )
