"""
Product service.

SKUs are unique and every product belongs to an existing category. Responses
carry the category's name next to its id.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.database.entities.categories import Category
from minicommerce_api.core.database.entities.products import Product
from minicommerce_api.core.database.repositories.categories import CategoryRepository
from minicommerce_api.core.database.repositories.products import ProductRepository
from minicommerce_api.core.errors import ConflictError, NotFoundError
from minicommerce_api.core.logging_config import get_logger
from minicommerce_api.core.models.io.products import ProductCreate, ProductPatch, ProductRead

logger = get_logger(__name__)

SKU_EXISTS = "SKU already exists"


def to_read(product: Product, category_name: str) -> ProductRead:
    return ProductRead(
        id=product.id,
        name=product.name,
        sku=product.sku,
        price=product.price,
        stock=product.stock,
        category_id=product.category_id,
        category_name=category_name,
    )


class ProductService:
    """Create, read, patch and delete products."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = ProductRepository(session)
        self.categories = CategoryRepository(session)

    async def create(self, payload: ProductCreate) -> ProductRead:
        sku = payload.sku.strip()
        if await self.repository.exists_by_sku(sku):
            raise ConflictError(SKU_EXISTS)
        category = await self._require_category(payload.category_id)
        product = Product(
            name=payload.name.strip(),
            sku=sku,
            price=payload.price,
            stock=payload.stock,
            category_id=category.id,
        )
        try:
            product = await self.repository.create(product)
        except IntegrityError as e:
            raise ConflictError(SKU_EXISTS) from e
        logger.info(f"Created product {product.id} ({product.sku})")
        return to_read(product, category.name)

    async def list(self, category_id: Optional[int] = None) -> List[ProductRead]:
        rows = await self.repository.list_with_category_name(category_id)
        return [to_read(product, category_name) for product, category_name in rows]

    async def get(self, product_id: int) -> ProductRead:
        product = await self._require(product_id)
        category = await self._require_category(product.category_id)
        return to_read(product, category.name)

    async def patch(self, product_id: int, payload: ProductPatch) -> ProductRead:
        """Apply the supplied fields of ``payload`` to a product.

        Fields left out of the request body keep their current value. A new
        SKU must not belong to another product, and a new category must exist.
        """
        product = await self._require(product_id)

        if payload.name is not None:
            product.name = payload.name.strip()
        if payload.sku is not None:
            sku = payload.sku.strip()
            if sku != product.sku and await self.repository.exists_by_sku(sku):
                raise ConflictError(SKU_EXISTS)
            product.sku = sku
        if payload.price is not None:
            product.price = payload.price
        if payload.stock is not None:
            product.stock = payload.stock
        if payload.category_id is not None:
            product.category_id = (await self._require_category(payload.category_id)).id

        try:
            product = await self.repository.update(product)
        except IntegrityError as e:
            raise ConflictError(SKU_EXISTS) from e
        category = await self._require_category(product.category_id)
        return to_read(product, category.name)

    async def delete(self, product_id: int) -> None:
        if not await self.repository.delete(product_id):
            raise NotFoundError("Product not found")
        logger.info(f"Deleted product {product_id}")

    async def _require(self, product_id: int) -> Product:
        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def _require_category(self, category_id: int) -> Category:
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category
