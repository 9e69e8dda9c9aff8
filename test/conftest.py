from __future__ import annotations

import os
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

# Point the application at an in-memory database before it is imported
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

from minicommerce_api.core.database import create_all, create_engine, create_sessionmaker  # noqa: E402


@pytest_asyncio.fixture(name="engine")
async def engine_fixture() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with every table, one per test."""
    engine = create_engine(TEST_DATABASE_URL)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on the per-test database."""
    async with create_sessionmaker(engine)() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app; each request gets its own session on the test database."""
    from minicommerce_api.core.database import get_session
    from minicommerce_api.server.main import app

    session_maker = create_sessionmaker(engine)

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
    app.dependency_overrides.clear()
