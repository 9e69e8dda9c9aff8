"""
Database layer for the Mini Commerce API.

This package provides a unified location for all database entities and repositories,
organized by business domain and table relationships.

Structure:
- entities/: Database entity models, one module per table group
- repositories/: Data access layer, one repository per aggregate
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, DDL helpers)
"""

from .base import Base
from .session import (
    async_session_maker,
    close_db,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "async_session_maker",
    "close_db",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "get_session",
    "init_db",
]
