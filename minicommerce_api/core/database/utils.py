"""
Database utility functions for engine and session management.

Functions:
- normalize_database_url: Forces the async driver onto SQLite URLs
- create_engine: Creates async SQLAlchemy engine with SQLite foreign keys enabled
- create_sessionmaker: Creates async session factory with safe defaults
- create_all / drop_all: Creates or drops all tables from ORM metadata
"""

from __future__ import annotations

import re
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .base import Base


def normalize_database_url(db_url: str) -> str:
    """Rewrite ``sqlite://`` and ``sqlite+pysqlite://`` URLs to ``sqlite+aiosqlite://``.

    Args:
        db_url: Database connection URL

    Returns:
        URL using an async driver
    """
    return re.sub(r"^sqlite(?:\+[a-z0-9_]+)?://", "sqlite+aiosqlite://", db_url, count=1)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    SQLite connections get ``PRAGMA foreign_keys=ON`` on connect, and
    in-memory databases share one connection through ``StaticPool`` so every
    session sees the same tables.

    Args:
        db_url: Database connection URL
        echo: Log emitted SQL statements

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_database_url(db_url)
    kwargs: dict[str, Any] = {"echo": echo}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_async_engine(url, **kwargs)
    if url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    # Entities register themselves on Base.metadata when imported
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop all tables of the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
