"""
Review Endpoints.

Users rate products from 1 to 5 stars with an optional comment.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from minicommerce_api.core.models.io.common import MAX_ID
from minicommerce_api.core.models.io.errors import ApiError
from minicommerce_api.core.models.io.reviews import ReviewCreate, ReviewPatch, ReviewRead
from minicommerce_api.server.api.v1.params import IdPath
from minicommerce_api.server.core import constant
from minicommerce_api.server.services.deps import ReviewServiceDep

router = APIRouter(tags=["reviews"])


@router.post(
    "",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Review",
    description="Write a review of a product on behalf of a user.",
    response_description="The created review; its URL is returned in the Location header.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        404: {"model": ApiError, "description": "User or product not found"},
    },
)
async def create_review(payload: ReviewCreate, response: Response, service: ReviewServiceDep) -> ReviewRead:
    """
    Create a new review.

    - **userId**: Author.
    - **productId**: Reviewed product.
    - **rating**: 1 to 5.
    - **comment**: Optional, up to 600 characters.
    """
    review = await service.create(payload)
    response.headers["Location"] = f"{constant.API_PREFIX}/reviews/{review.id}"
    return review


@router.get(
    "",
    response_model=List[ReviewRead],
    summary="List Reviews",
    description="Retrieve every review ordered by id, optionally only those of one product.",
)
async def list_reviews(
    service: ReviewServiceDep,
    product_id: Optional[int] = Query(default=None, alias="productId", le=MAX_ID, description="Only list this product"),
) -> List[ReviewRead]:
    return await service.list(product_id)


@router.get(
    "/{review_id}",
    response_model=ReviewRead,
    summary="Get Review",
    description="Retrieve a single review by id.",
    responses={404: {"model": ApiError, "description": "Review not found"}},
)
async def get_review(review_id: IdPath, service: ReviewServiceDep) -> ReviewRead:
    return await service.get(review_id)


@router.patch(
    "/{review_id}",
    response_model=ReviewRead,
    summary="Update Review",
    description="Change the rating and/or the comment of a review.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        404: {"model": ApiError, "description": "Review not found"},
    },
)
async def patch_review(review_id: IdPath, payload: ReviewPatch, service: ReviewServiceDep) -> ReviewRead:
    return await service.patch(review_id, payload)


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Review",
    description="Delete a review.",
    responses={404: {"model": ApiError, "description": "Review not found"}},
)
async def delete_review(review_id: IdPath, service: ReviewServiceDep) -> Response:
    await service.delete(review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
