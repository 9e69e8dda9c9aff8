"""Category I/O models for API requests and responses."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

from .common import ApiModel

CategoryName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=80)]


class CategoryCreate(ApiModel):
    """Schema for creating a category. The slug is derived from the name."""

    name: CategoryName = Field(description="Category name", examples=["Home & Garden"])


class CategoryUpdate(ApiModel):
    """Schema for renaming a category (PUT). The slug is recomputed."""

    name: CategoryName = Field(description="New category name", examples=["Garden"])


class CategoryRead(ApiModel):
    """Schema for reading a category."""

    id: int
    name: str
    slug: str
