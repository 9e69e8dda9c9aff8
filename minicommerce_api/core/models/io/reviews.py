"""Review I/O models for API requests and responses."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from .common import ApiModel, EntityId

Rating = Annotated[int, Field(ge=1, le=5)]
Comment = Annotated[str, Field(max_length=600)]


class ReviewCreate(ApiModel):
    """Schema for writing a review."""

    user_id: EntityId = Field(description="Author of the review")
    product_id: EntityId = Field(description="Reviewed product")
    rating: Rating = Field(description="Star rating from 1 to 5")
    comment: Optional[Comment] = Field(default=None, description="Free text, up to 600 characters")


class ReviewPatch(ApiModel):
    """Schema for changing the rating and/or comment of a review."""

    rating: Optional[Rating] = None
    comment: Optional[Comment] = None


class ReviewRead(ApiModel):
    """Schema for reading a review."""

    id: int
    user_id: int
    product_id: int
    rating: int
    comment: Optional[str] = None
