"""
Availabilities repository.

Date queries here use the same inclusive semantics as
``stay_with_friends.core.availability``, pushed down into SQL.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from stay_with_friends.core import availability as windows
from stay_with_friends.core.models.domain.enums import AvailabilityStatus

from ..entities.availabilities import Availability
from .base import SqlRepository


class AvailabilityRepository(SqlRepository[Availability]):
    """Repository for availability data access operations using SQLModel."""

    default_order_by = "start_date"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Availability)

    async def list_by_host(self, host_id: str) -> List[Availability]:
        stmt = select(Availability).where(Availability.host_id == host_id).order_by(Availability.start_date)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_hosts(self, host_ids: Iterable[str]) -> Dict[str, List[Availability]]:
        """Load the windows of several hosts in one query.

        Args:
            host_ids: Host IDs to load

        Returns:
            Mapping of host ID to its windows ordered by start date. Every
            requested host has an entry, possibly empty.
        """
        ids = list(dict.fromkeys(host_ids))
        grouped: Dict[str, List[Availability]] = {host_id: [] for host_id in ids}
        if not ids:
            return grouped
        stmt = (
            select(Availability)
            .where(Availability.host_id.in_(ids))  # type: ignore[attr-defined]
            .order_by(Availability.start_date)
        )
        result = await self.session.execute(stmt)
        for row in result.scalars().all():
            grouped[row.host_id].append(row)
        return grouped

    async def list_covering(self, day: date) -> List[Availability]:
        """Available windows with ``start_date <= day <= end_date``."""
        stmt = (
            select(Availability)
            .where(Availability.status == AvailabilityStatus.AVAILABLE.value)
            .where(Availability.start_date <= day)
            .where(Availability.end_date >= day)
            .order_by(Availability.start_date)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_overlapping(
        self, start: date, end: date, host_id: Optional[str] = None, only_available: bool = True
    ) -> List[Availability]:
        """Windows that intersect the inclusive range ``[start, end]``.

        Args:
            start: First day of the range
            end: Last day of the range
            host_id: Restrict to one host
            only_available: Skip windows that are not ``available``

        Returns:
            Matching windows ordered by start date
        """
        stmt = select(Availability).where(Availability.start_date <= end).where(Availability.end_date >= start)
        if only_available:
            stmt = stmt.where(Availability.status == AvailabilityStatus.AVAILABLE.value)
        if host_id is not None:
            stmt = stmt.where(Availability.host_id == host_id)
        result = await self.session.execute(stmt.order_by(Availability.start_date))
        return list(result.scalars().all())

    async def available_dates(self, start: date, end: date) -> List[date]:
        """Distinct days in ``[start, end]`` that any host has available."""
        return windows.available_dates(start, end, await self.list_overlapping(start, end))

    async def delete_by_host(self, host_id: str) -> int:
        result = await self.session.execute(delete(Availability).where(Availability.host_id == host_id))
        await self.session.flush()
        return result.rowcount or 0
