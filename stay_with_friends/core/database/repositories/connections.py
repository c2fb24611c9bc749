"""
Connections repository.

Connections are directed rows; most lookups therefore check both directions
between a pair of users.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from stay_with_friends.core.models.domain.enums import ConnectionStatus

from ..entities.connections import Connection
from .base import SqlRepository


def _between(user_a: str, user_b: str):
    return or_(
        and_(Connection.user_id == user_a, Connection.connected_user_id == user_b),
        and_(Connection.user_id == user_b, Connection.connected_user_id == user_a),
    )


class ConnectionRepository(SqlRepository[Connection]):
    """Repository for connection data access operations using SQLModel."""

    default_order_by = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Connection)

    async def get_between(self, user_a: str, user_b: str) -> Optional[Connection]:
        """Find any connection between two users, in either direction."""
        result = await self.session.execute(select(Connection).where(_between(user_a, user_b)))
        return result.scalars().first()

    async def get_directed(self, user_id: str, connected_user_id: str) -> Optional[Connection]:
        stmt = select(Connection).where(
            Connection.user_id == user_id, Connection.connected_user_id == connected_user_id
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_accepted_for_user(self, user_id: str) -> List[Connection]:
        """Accepted connections where the user is on either side.

        Args:
            user_id: User whose network is listed

        Returns:
            Connections ordered by creation time
        """
        stmt = (
            select(Connection)
            .where(or_(Connection.user_id == user_id, Connection.connected_user_id == user_id))
            .where(Connection.status == ConnectionStatus.ACCEPTED.value)
            .order_by(Connection.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_incoming_pending(self, user_id: str) -> List[Connection]:
        """Pending requests addressed to the user."""
        stmt = (
            select(Connection)
            .where(Connection.connected_user_id == user_id)
            .where(Connection.status == ConnectionStatus.PENDING.value)
            .order_by(Connection.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_between(self, user_a: str, user_b: str) -> int:
        """Remove the rows in both directions between two users."""
        result = await self.session.execute(delete(Connection).where(_between(user_a, user_b)))
        await self.session.flush()
        return result.rowcount or 0
