"""Integration tests for the category endpoints."""

from httpx import AsyncClient


class TestCategoriesApi:
    """Test category CRUD and the deletion rule."""

    async def test_create(self, client: AsyncClient):
        """Test creating a category trims the name and derives the slug."""
        response = await client.post("/api/categories", json={"name": "  Home & Garden "})

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Home & Garden"
        assert body["slug"] == "home-garden"
        assert response.headers["location"] == f"/api/categories/{body['id']}"

    async def test_blank_name(self, client: AsyncClient):
        """Test a whitespace-only name is rejected."""
        response = await client.post("/api/categories", json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["violations"][0]["field"] == "name"

    async def test_duplicate(self, client: AsyncClient, create_category):
        """Test names are unique regardless of case."""
        await create_category("Books")

        response = await client.post("/api/categories", json={"name": "BOOKS"})

        assert response.status_code == 409

    async def test_get_list_put(self, client: AsyncClient, create_category):
        """Test reading a category and renaming it regenerates the slug."""
        category = await create_category("Books")

        assert (await client.get(f"/api/categories/{category['id']}")).json() == category
        assert (await client.get("/api/categories")).json() == [category]

        response = await client.put(f"/api/categories/{category['id']}", json={"name": "Café Books"})
        assert response.status_code == 200
        assert response.json()["slug"] == "cafe-books"

    async def test_missing(self, client: AsyncClient):
        """Test read, replace and delete of an unknown id all return 404."""
        for response in (
            await client.get("/api/categories/5"),
            await client.put("/api/categories/5", json={"name": "X"}),
            await client.delete("/api/categories/5"),
        ):
            assert response.status_code == 404
            assert response.json()["message"] == "Category not found"

    async def test_delete_with_products(self, client: AsyncClient, create_category, create_product):
        """Test a category that still holds products cannot be deleted."""
        category = await create_category()
        await create_product(category["id"])

        response = await client.delete(f"/api/categories/{category['id']}")

        assert response.status_code == 409
        assert response.json()["message"] == "Category has products; delete or move products first"

    async def test_delete(self, client: AsyncClient, create_category):
        """Test deleting an empty category."""
        category = await create_category()

        assert (await client.delete(f"/api/categories/{category['id']}")).status_code == 204
        assert (await client.get("/api/categories")).json() == []
