"""
Site statistics service.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database.repositories import StatsRepository
from stay_with_friends.core.models.io.stats import SiteStats


class StatsService:
    """Read-only counts for the landing page."""

    def __init__(self, session: AsyncSession) -> None:
        self.stats = StatsRepository(session)

    async def site_stats(self) -> SiteStats:
        return SiteStats(
            total_hosts=await self.stats.total_hosts(),
            total_connections=await self.stats.total_connections(),
            total_bookings=await self.stats.total_bookings(),
        )

    async def total_hosts(self) -> int:
        return await self.stats.total_hosts()

    async def total_connections(self) -> int:
        return await self.stats.total_connections()

    async def total_bookings(self) -> int:
        return await self.stats.total_bookings()
