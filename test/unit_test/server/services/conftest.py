"""Fixtures building a small catalog through the services."""

from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.models.io import (
    CategoryCreate,
    CategoryRead,
    ProductCreate,
    ProductRead,
    UserCreate,
    UserRead,
)
from minicommerce_api.server.services import CategoryService, ProductService, UserService


@pytest_asyncio.fixture
async def user(session: AsyncSession) -> UserRead:
    """A customer created through the user service."""
    return await UserService(session).create(UserCreate(name="Ada", email="ada@example.com"))


@pytest_asyncio.fixture
async def category(session: AsyncSession) -> CategoryRead:
    """The Books category."""
    return await CategoryService(session).create(CategoryCreate(name="Books"))


@pytest_asyncio.fixture
async def product(session: AsyncSession, category: CategoryRead) -> ProductRead:
    """A Novel in the Books category with five in stock."""
    return await ProductService(session).create(
        ProductCreate(name="Novel", sku="BK-1", price=Decimal("12.50"), stock=5, category_id=category.id)
    )
