"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.logging_config import get_logger
from minicommerce_api.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database.url, echo=settings.database.echo)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Creates every table that does not exist yet. The embedded SQLite database
    is created on first start this way; managed databases can use the Alembic
    migrations instead, in which case this is a no-op.
    """
    logger.debug(f"Creating tables on {engine.url.render_as_string(hide_password=True)}")
    await create_all(engine)


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
