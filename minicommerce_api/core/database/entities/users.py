"""
User entity models.

Users are the shop's customers. They place orders and write reviews.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now


class UserBase(Base):
    """Base fields for a user."""

    name: str = Field(min_length=1, max_length=80, description="Display name")
    email: str = Field(min_length=1, max_length=200, description="Normalized (trimmed, lower-cased) e-mail")


class User(UserBase, table=True):
    """Persistent shop customer.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uk_users_email"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
