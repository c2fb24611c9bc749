"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker, drop_all

# Create global engine and session factory
engine = create_engine(settings.database_url)
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

    Creates every table that does not exist yet. Tables are derived from the
    entity metadata, there are no migration scripts.
    """
    await create_all(engine)


async def reset_db() -> None:
    """Drop and recreate every table."""
    await drop_all(engine)
    await create_all(engine)
