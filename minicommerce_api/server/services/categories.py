"""
Category service.

The slug of a category is always derived from its name. Categories that
still hold products cannot be deleted.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.database.entities.categories import Category
from minicommerce_api.core.database.repositories.categories import CategoryRepository
from minicommerce_api.core.database.repositories.products import ProductRepository
from minicommerce_api.core.errors import ConflictError, NotFoundError
from minicommerce_api.core.logging_config import get_logger
from minicommerce_api.core.models.io.categories import CategoryCreate, CategoryRead, CategoryUpdate
from minicommerce_api.core.slug import slugify

logger = get_logger(__name__)

CATEGORY_EXISTS = "Category already exists"


class CategoryService:
    """Create, read, rename and delete categories."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = CategoryRepository(session)
        self.products = ProductRepository(session)

    async def create(self, payload: CategoryCreate) -> CategoryRead:
        name = payload.name.strip()
        if await self.repository.exists_by_name_ignore_case(name):
            raise ConflictError(CATEGORY_EXISTS)
        try:
            category = await self.repository.create(Category(name=name, slug=slugify(name)))
        except IntegrityError as e:
            raise ConflictError(CATEGORY_EXISTS) from e
        logger.info(f"Created category {category.id} ({category.slug})")
        return CategoryRead.model_validate(category)

    async def list(self) -> List[CategoryRead]:
        return [CategoryRead.model_validate(category) for category in await self.repository.list()]

    async def get(self, category_id: int) -> CategoryRead:
        return CategoryRead.model_validate(await self._require(category_id))

    async def update(self, category_id: int, payload: CategoryUpdate) -> CategoryRead:
        category = await self._require(category_id)
        name = payload.name.strip()
        if name.lower() != category.name.lower() and await self.repository.exists_by_name_ignore_case(name):
            raise ConflictError(CATEGORY_EXISTS)
        category.name = name
        category.slug = slugify(name)
        try:
            category = await self.repository.update(category)
        except IntegrityError as e:
            raise ConflictError(CATEGORY_EXISTS) from e
        return CategoryRead.model_validate(category)

    async def delete(self, category_id: int) -> None:
        await self._require(category_id)
        if await self.products.exists_by_category_id(category_id):
            raise ConflictError("Category has products; delete or move products first")
        await self.repository.delete(category_id)
        logger.info(f"Deleted category {category_id}")

    async def _require(self, category_id: int) -> Category:
        category = await self.repository.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category
