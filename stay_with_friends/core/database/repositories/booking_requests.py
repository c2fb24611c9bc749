"""
Booking requests repository.

Data access for stay requests, from the guest side (by requester) and from
the host side (by host, or across every host a user owns).
"""

from __future__ import annotations

from typing import List

from sqlalchemy import func
from sqlalchemy import select as sa_select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from stay_with_friends.core.models.domain.enums import BookingStatus

from ..entities.booking_requests import BookingRequest
from ..entities.hosts import Host
from .base import SqlRepository


class BookingRequestRepository(SqlRepository[BookingRequest]):
    """Repository for booking request data access operations using SQLModel."""

    default_order_by = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BookingRequest)

    async def list_by_host(self, host_id: str) -> List[BookingRequest]:
        stmt = (
            select(BookingRequest)
            .where(BookingRequest.host_id == host_id)
            .order_by(BookingRequest.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_requester(self, requester_id: str) -> List[BookingRequest]:
        stmt = (
            select(BookingRequest)
            .where(BookingRequest.requester_id == requester_id)
            .order_by(BookingRequest.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_host_owner(self, user_id: str) -> List[BookingRequest]:
        """List the requests made to any host owned by ``user_id``, newest first.

        Args:
            user_id: Owner of the hosts

        Returns:
            List of BookingRequest instances
        """
        owned = select(Host.id).where(Host.user_id == user_id)
        stmt = (
            select(BookingRequest)
            .where(BookingRequest.host_id.in_(owned))  # type: ignore[attr-defined]
            .order_by(BookingRequest.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_pending_for_host_owner(self, user_id: str) -> int:
        owned = sa_select(Host.id).where(Host.user_id == user_id)
        stmt = (
            sa_select(func.count())
            .select_from(BookingRequest)
            .where(BookingRequest.host_id.in_(owned))  # type: ignore[attr-defined]
            .where(BookingRequest.status == BookingStatus.PENDING.value)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
