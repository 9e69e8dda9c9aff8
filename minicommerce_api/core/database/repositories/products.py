"""
Product repository implementation.

Provides data access for catalog items, including SKU lookups and queries by
category used for filtering and for the category deletion rule.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import Category
from ..entities.products import Product
from .base import SQLModelRepository


class ProductRepository(SQLModelRepository[Product]):
    """Repository for product data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, Product)

    async def exists_by_sku(self, sku: str) -> bool:
        """Check whether any product already uses the SKU.

        Args:
            sku: Trimmed SKU

        Returns:
            True if the SKU is taken
        """
        stmt = select(func.count()).select_from(Product).where(Product.sku == sku)
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def exists_by_category_id(self, category_id: int) -> bool:
        stmt = select(func.count()).select_from(Product).where(Product.category_id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def list_with_category_name(self, category_id: Optional[int] = None) -> List[Tuple[Product, str]]:
        """List products joined with the name of their category.

        Args:
            category_id: Only return products of this category when given

        Returns:
            ``(product, category_name)`` pairs ordered by product id
        """
        stmt = select(Product, Category.name).join(Category, Category.id == Product.category_id).order_by(Product.id)
        if category_id is not None:
            stmt = stmt.where(Product.category_id == category_id)
        result = await self.session.execute(stmt)
        return [(product, category_name) for product, category_name in result.all()]
