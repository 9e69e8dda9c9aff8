"""
Category repository implementation.

Provides data access for product categories, including the
case-insensitive name lookup used for uniqueness checks.
"""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.categories import Category
from .base import SQLModelRepository


class CategoryRepository(SQLModelRepository[Category]):
    """Repository for category data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, Category)

    async def exists_by_name_ignore_case(self, name: str) -> bool:
        stmt = select(func.count()).select_from(Category).where(func.lower(Category.name) == name.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0
