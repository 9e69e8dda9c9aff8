"""
Review entity models.

A review is a 1 to 5 star rating, with an optional comment, written by a
user about a product.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class ReviewBase(Base):
    """Base fields for a review."""

    user_id: int = Field(foreign_key="users.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    rating: int = Field(ge=1, le=5, description="Star rating from 1 to 5")
    comment: Optional[str] = Field(default=None, max_length=600)


class Review(ReviewBase, table=True):
    """Persistent product review.

    Table: reviews
    """

    __tablename__ = "reviews"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)
