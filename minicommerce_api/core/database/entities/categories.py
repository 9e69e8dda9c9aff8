"""
Category entity models.

A category groups products. Its slug is derived from the name and both are
unique across the table.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now


class CategoryBase(Base):
    """Base fields for a category."""

    name: str = Field(min_length=1, max_length=80, description="Category name")
    slug: str = Field(max_length=120, description="URL-friendly form of the name")


class Category(CategoryBase, table=True):
    """Persistent product category.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("name", name="uk_categories_name"),
        UniqueConstraint("slug", name="uk_categories_slug"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"Category(id={self.id}, slug={self.slug})"
