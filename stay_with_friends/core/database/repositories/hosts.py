"""
Hosts repository.

Data access for host listings, including the free-text search used by the
search page.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import delete, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from stay_with_friends.core.models.domain.enums import AvailabilityStatus

from ..entities.availabilities import Availability
from ..entities.booking_requests import BookingRequest
from ..entities.hosts import Host
from .base import SqlRepository


class HostRepository(SqlRepository[Host]):
    """Repository for host data access operations using SQLModel."""

    default_order_by = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Host)

    async def search(self, query: Optional[str] = None, start_date: Optional[date] = None) -> List[Host]:
        """Search hosts by text and, optionally, by an available day.

        The text matches case-insensitively anywhere in name, description,
        location, city or state. When ``start_date`` is given, only hosts with
        an available window covering that day are returned.

        Args:
            query: Substring to look for, empty means every host
            start_date: Day the guest wants to arrive

        Returns:
            Distinct hosts ordered by name
        """
        stmt = select(Host)
        if query:
            # autoescape keeps % and _ in the query literal
            needle = query.lower()
            columns = (Host.name, Host.description, Host.location, Host.city, Host.state)
            stmt = stmt.where(
                or_(*(func.lower(func.coalesce(column, "")).contains(needle, autoescape=True) for column in columns))
            )
        if start_date is not None:
            covering = (
                select(Availability.host_id)
                .where(Availability.status == AvailabilityStatus.AVAILABLE.value)
                .where(Availability.start_date <= start_date)
                .where(Availability.end_date >= start_date)
            )
            stmt = stmt.where(Host.id.in_(covering))  # type: ignore[union-attr]
        stmt = stmt.order_by(Host.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_referencing_photo(self, file_name: str) -> List[Host]:
        """Hosts whose ``photos`` JSON mentions ``file_name``.

        This is a text match, so callers confirm against the decoded list.
        """
        stmt = select(Host).where(func.coalesce(Host.photos, "").contains(file_name, autoescape=True))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_cascade(self, host_id: str) -> bool:
        """Delete a host together with its availabilities and booking requests.

        Args:
            host_id: Host ID to delete

        Returns:
            True if the host existed
        """
        host = await self.get_by_id(host_id)
        if host is None:
            return False
        await self.session.execute(delete(Availability).where(Availability.host_id == host_id))
        await self.session.execute(delete(BookingRequest).where(BookingRequest.host_id == host_id))
        await self.session.delete(host)
        await self.session.flush()
        return True
