"""
Database layer for Stay With Friends.

This package provides a unified location for all database entities and repositories,
organized by table.

Structure:
- entities/: SQLModel table models, one module per table
- repositories/: Data access layer, one repository per table
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session, table creation)
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
    reset_db,
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
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "get_session",
    "init_db",
    "reset_db",
]
