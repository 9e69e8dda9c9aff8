"""Integration tests for the health and version endpoints."""

from httpx import AsyncClient


async def test_health(client: AsyncClient):
    """Test the health endpoint reports ok."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_version(client: AsyncClient):
    """Test the version endpoint reports the application and schema versions."""
    response = await client.get("/version")

    assert response.status_code == 200
    assert response.json() == {"version": "0.0.1", "schema_version": "v1"}


async def test_process_time_header(client: AsyncClient):
    """Test every response carries the processing time header."""
    response = await client.get("/health")

    assert "x-process-time" in response.headers
