"""
User I/O models for API requests and responses.

Names are trimmed by validation; e-mail addresses must be syntactically valid
and are normalized (trimmed, lower-cased) by the service before storage.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import EmailStr, Field, StringConstraints, field_validator

from .common import ApiModel

MAX_EMAIL_LENGTH = 200

UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=80)]


class UserWrite(ApiModel):
    """Fields shared by user creation and full replacement."""

    name: UserName = Field(description="Display name", examples=["Ada Lovelace"])
    email: EmailStr = Field(description="E-mail address, unique per user", examples=["ada@example.com"])

    @field_validator("email")
    @classmethod
    def check_email_length(cls, value: str) -> str:
        if len(value) > MAX_EMAIL_LENGTH:
            raise ValueError(f"size must be between 0 and {MAX_EMAIL_LENGTH}")
        return value


class UserCreate(UserWrite):
    """Schema for creating a user."""


class UserUpdate(UserWrite):
    """Schema for replacing a user (PUT)."""


class UserRead(ApiModel):
    """Schema for reading a user."""

    id: int
    name: str
    email: str
