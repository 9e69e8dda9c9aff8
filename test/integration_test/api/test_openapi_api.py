"""Integration tests for the generated API documentation."""

from unittest.mock import patch

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine

DOCUMENTED_PATHS = (
    "/api/users",
    "/api/categories/{category_id}",
    "/api/products",
    "/api/orders/{order_id}",
    "/api/reviews",
)


async def test_openapi_schema(client: AsyncClient):
    """Test the schema lists every resource and each operation is described."""
    response = await client.get("/api/openapi.json")

    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "Mini Commerce API"
    for path in DOCUMENTED_PATHS:
        assert path in schema["paths"]
    for operations in schema["paths"].values():
        for operation in operations.values():
            assert operation.get("summary")
            assert operation.get("description")


async def test_docs_pages(client: AsyncClient):
    """Test the Swagger UI and ReDoc pages are served."""
    assert (await client.get("/api/docs")).status_code == 200
    assert (await client.get("/api/redoc")).status_code == 200


async def test_unknown_route_uses_error_body(client: AsyncClient):
    """Test framework 404 responses use the uniform error body."""
    response = await client.get("/api/nothing-here")

    assert response.status_code == 404
    body = response.json()
    assert body["status"] == 404
    assert body["path"] == "/api/nothing-here"


async def test_unexpected_error_returns_500(engine: AsyncEngine):
    """Test an unhandled exception becomes a 500 with the uniform error body."""
    from minicommerce_api.core.database import get_session
    from minicommerce_api.core.database.utils import create_sessionmaker
    from minicommerce_api.server.main import app

    session_maker = create_sessionmaker(engine)

    async def get_session_override():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    try:
        with patch(
            "minicommerce_api.server.services.users.UserService.list", side_effect=RuntimeError("boom")
        ):
            transport = ASGITransport(app=app, raise_app_exceptions=False)
            async with AsyncClient(transport=transport, base_url="http://localhost") as client:
                response = await client.get("/api/users")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Unexpected error"
    assert body["error"] == "Internal Server Error"
