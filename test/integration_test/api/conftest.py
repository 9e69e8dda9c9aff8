"""Helpers creating resources through the HTTP API."""

from typing import Any, Awaitable, Callable, Dict

import pytest
from httpx import AsyncClient

Resource = Dict[str, Any]


@pytest.fixture
def create_user(client: AsyncClient) -> Callable[..., Awaitable[Resource]]:
    """Factory creating a user and returning its JSON body."""

    async def _create(name: str = "Ada", email: str = "ada@example.com") -> Resource:
        response = await client.post("/api/users", json={"name": name, "email": email})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_category(client: AsyncClient) -> Callable[..., Awaitable[Resource]]:
    """Factory creating a category and returning its JSON body."""

    async def _create(name: str = "Books") -> Resource:
        response = await client.post("/api/categories", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_product(client: AsyncClient) -> Callable[..., Awaitable[Resource]]:
    """Factory creating a product in a category and returning its JSON body."""

    async def _create(
        category_id: int, name: str = "Novel", sku: str = "BK-1", price: float = 12.5, stock: int = 5
    ) -> Resource:
        response = await client.post(
            "/api/products",
            json={"name": name, "sku": sku, "price": price, "stock": stock, "categoryId": category_id},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
