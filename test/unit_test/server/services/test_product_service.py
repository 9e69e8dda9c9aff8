"""Unit tests for ProductService."""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.errors import ConflictError, NotFoundError
from minicommerce_api.core.models.io import CategoryCreate, ProductCreate, ProductPatch
from minicommerce_api.server.services import CategoryService, ProductService


class TestProductService:
    """Test the product business rules."""

    async def test_create(self, session: AsyncSession, category):
        """Test a created product carries its category name."""
        product = await ProductService(session).create(
            ProductCreate(name=" Pen ", sku="  OF-1 ", price=Decimal("1.20"), category_id=category.id)
        )

        assert product.sku == "OF-1"
        assert product.name == "Pen"
        assert product.stock == 0
        assert product.category_name == "Books"

    async def test_duplicate_sku(self, session: AsyncSession, product, category):
        """Test SKUs are unique."""
        with pytest.raises(ConflictError, match="SKU already exists"):
            await ProductService(session).create(
                ProductCreate(name="Other", sku=" BK-1", price=Decimal("1.00"), category_id=category.id)
            )

    async def test_unknown_category(self, session: AsyncSession):
        """Test a product needs an existing category."""
        with pytest.raises(NotFoundError, match="Category not found"):
            await ProductService(session).create(
                ProductCreate(name="Pen", sku="OF-1", price=Decimal("1.00"), category_id=77)
            )

    async def test_list_filters_by_category(self, session: AsyncSession, product):
        """Test the listing can be narrowed to one category."""
        games = await CategoryService(session).create(CategoryCreate(name="Games"))
        service = ProductService(session)
        chess = await service.create(
            ProductCreate(name="Chess", sku="GM-1", price=Decimal("30.00"), category_id=games.id)
        )

        assert [p.id for p in await service.list()] == [product.id, chess.id]
        assert [p.id for p in await service.list(games.id)] == [chess.id]
        assert await service.list(999) == []

    async def test_patch_only_supplied_fields(self, session: AsyncSession, product):
        """Test a patch leaves the other fields alone."""
        patched = await ProductService(session).patch(product.id, ProductPatch(price=Decimal("9.99")))

        assert patched.price == Decimal("9.99")
        assert patched.name == "Novel"
        assert patched.sku == "BK-1"
        assert patched.stock == 5

    async def test_patch_same_sku_allowed(self, session: AsyncSession, product):
        """Test patching a product with its own SKU is allowed."""
        patched = await ProductService(session).patch(product.id, ProductPatch(sku="BK-1", stock=0))
        assert patched.stock == 0

    async def test_patch_sku_taken(self, session: AsyncSession, product, category):
        """Test taking another product's SKU is a conflict."""
        service = ProductService(session)
        other = await service.create(
            ProductCreate(name="Atlas", sku="BK-2", price=Decimal("40.00"), category_id=category.id)
        )

        with pytest.raises(ConflictError):
            await service.patch(other.id, ProductPatch(sku="BK-1"))

    async def test_patch_moves_category(self, session: AsyncSession, product):
        """Test a product can move to another category."""
        games = await CategoryService(session).create(CategoryCreate(name="Games"))

        patched = await ProductService(session).patch(product.id, ProductPatch(category_id=games.id))

        assert patched.category_id == games.id
        assert patched.category_name == "Games"

    async def test_patch_unknown_category(self, session: AsyncSession, product):
        """Test moving to an unknown category raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Category not found"):
            await ProductService(session).patch(product.id, ProductPatch(category_id=999))

    async def test_get_and_delete(self, session: AsyncSession, product):
        """Test reading and deleting a product."""
        service = ProductService(session)
        assert (await service.get(product.id)).category_name == "Books"

        await service.delete(product.id)
        with pytest.raises(NotFoundError, match="Product not found"):
            await service.get(product.id)
        with pytest.raises(NotFoundError):
            await service.delete(product.id)
