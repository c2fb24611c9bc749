"""
Repository base classes.

Every table gets a repository built on ``SqlRepository``. Repositories stage
rows with ``add`` + ``flush`` and leave ``commit`` to the service layer, which
wraps each operation in a single transaction. Invitation acceptance and
booking approval touch several tables and must land together.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy import select as sa_select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """CRUD contract for a single table."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Add a new row and flush it so generated values are populated."""

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> Optional[EntityType]:
        """Look a row up by primary key, ``None`` when absent."""

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Flush pending attribute changes on a loaded row."""

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Remove a row by primary key. Returns False when nothing matched."""

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """Return rows matching ``filters`` (column name to value), paginated."""


class SqlRepository(AsyncBaseRepository[EntityType]):
    """Default SQLModel implementation used by every table."""

    default_order_by: Optional[str] = None

    async def create(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def get_by_id(self, entity_id: str) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def update(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity_id: str) -> bool:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.flush()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        stmt = QueryBuilder.where_equal(select(self.model), self.model, filters)
        if self.default_order_by:
            stmt = stmt.order_by(getattr(self.model, self.default_order_by))
        stmt = QueryBuilder.page(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        stmt = QueryBuilder.where_equal(sa_select(func.count()).select_from(self.model), self.model, filters)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())


class QueryBuilder:
    """Statement helpers shared by the repositories."""

    @staticmethod
    def where_equal(stmt, model: Type[EntityType], filters: Optional[Dict[str, Any]]):
        """Add ``column == value`` clauses.

        Keys that are not columns of ``model`` and ``None`` values are ignored,
        so callers can pass optional query parameters straight through.
        """
        for column, value in (filters or {}).items():
            if value is None or not hasattr(model, column):
                continue
            stmt = stmt.where(getattr(model, column) == value)
        return stmt

    @staticmethod
    def page(stmt, limit: Optional[int], offset: Optional[int]):
        if limit is not None:
            stmt = stmt.limit(limit)
        return stmt if offset is None else stmt.offset(offset)
