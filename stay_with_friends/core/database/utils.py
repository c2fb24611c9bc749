"""
Engine, session and schema helpers.

- create_engine: async engine, plain sqlite URLs are upgraded to aiosqlite
- create_sessionmaker: sessions keep attributes loaded after commit
- create_all / drop_all: Create or drop every table from the entity metadata
- new_id / utc_now: Default factories shared by the entities
- UTCTimestamp: column type for every timestamp, aware UTC in Python
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.types import TypeDecorator

from .base import Base


def create_engine(db_url: str) -> AsyncEngine:
    """Build the async engine, forcing the aiosqlite driver for ``sqlite:///app.db`` style URLs."""
    url = re.sub(r"^sqlite(?:\+[a-z0-9_]+)?://", "sqlite+aiosqlite://", db_url, count=1)
    return create_async_engine(url, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Services hand entities back after commit, so nothing may expire.
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop every table; used by the dev reset."""
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UTCTimestamp(TypeDecorator):
    """Timestamp stored as naive UTC and loaded back as aware UTC.

    SQLite keeps no offset, so values are normalised to UTC on the way in.
    Naive values are taken to already be UTC.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
