"""Review service."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.database.entities.reviews import Review
from minicommerce_api.core.database.repositories.products import ProductRepository
from minicommerce_api.core.database.repositories.reviews import ReviewRepository
from minicommerce_api.core.database.repositories.users import UserRepository
from minicommerce_api.core.errors import NotFoundError
from minicommerce_api.core.logging_config import get_logger
from minicommerce_api.core.models.io.reviews import ReviewCreate, ReviewPatch, ReviewRead

logger = get_logger(__name__)


class ReviewService:
    """Create, read, patch and delete product reviews."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = ReviewRepository(session)
        self.users = UserRepository(session)
        self.products = ProductRepository(session)

    async def create(self, payload: ReviewCreate) -> ReviewRead:
        if await self.users.get_by_id(payload.user_id) is None:
            raise NotFoundError("User not found")
        if await self.products.get_by_id(payload.product_id) is None:
            raise NotFoundError("Product not found")
        review = await self.repository.create(
            Review(
                user_id=payload.user_id,
                product_id=payload.product_id,
                rating=payload.rating,
                comment=payload.comment,
            )
        )
        logger.info(f"Created review {review.id} for product {review.product_id}")
        return ReviewRead.model_validate(review)

    async def list(self, product_id: Optional[int] = None) -> List[ReviewRead]:
        if product_id is None:
            reviews = await self.repository.list()
        else:
            reviews = await self.repository.find_by_product_id(product_id)
        return [ReviewRead.model_validate(review) for review in reviews]

    async def get(self, review_id: int) -> ReviewRead:
        return ReviewRead.model_validate(await self._require(review_id))

    async def patch(self, review_id: int, payload: ReviewPatch) -> ReviewRead:
        review = await self._require(review_id)
        if payload.rating is not None:
            review.rating = payload.rating
        if payload.comment is not None:
            review.comment = payload.comment
        review = await self.repository.update(review)
        return ReviewRead.model_validate(review)

    async def delete(self, review_id: int) -> None:
        if not await self.repository.delete(review_id):
            raise NotFoundError("Review not found")

    async def _require(self, review_id: int) -> Review:
        review = await self.repository.get_by_id(review_id)
        if review is None:
            raise NotFoundError("Review not found")
        return review
