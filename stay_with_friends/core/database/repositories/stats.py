"""
Site statistics repository.

Read-only aggregate counts shown on the landing page.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.models.domain.enums import BookingStatus, ConnectionStatus

from ..entities.booking_requests import BookingRequest
from ..entities.connections import Connection
from ..entities.hosts import Host


class StatsRepository:
    """Aggregate counts across tables."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _scalar(self, stmt) -> int:
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def total_hosts(self) -> int:
        return await self._scalar(select(func.count()).select_from(Host))

    async def total_connections(self) -> int:
        # Raw row count, so a mutual friendship counts twice
        stmt = select(func.count()).select_from(Connection).where(Connection.status == ConnectionStatus.ACCEPTED.value)
        return await self._scalar(stmt)

    async def total_bookings(self) -> int:
        stmt = (
            select(func.count())
            .select_from(BookingRequest)
            .where(BookingRequest.status == BookingStatus.APPROVED.value)
        )
        return await self._scalar(stmt)
