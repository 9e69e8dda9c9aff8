"""
Review repository implementation.

Provides data access for product reviews.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.reviews import Review
from .base import SQLModelRepository


class ReviewRepository(SQLModelRepository[Review]):
    """Repository for review data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, Review)

    async def find_by_product_id(self, product_id: int) -> List[Review]:
        """List the reviews of one product, oldest first.

        Args:
            product_id: Product identifier

        Returns:
            List of Review instances
        """
        return await self.list(filters={"product_id": product_id})
