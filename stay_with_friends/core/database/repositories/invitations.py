"""
Invitations repository.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from stay_with_friends.core.models.domain.enums import InvitationStatus

from ..entities.invitations import Invitation
from .base import SqlRepository


class InvitationRepository(SqlRepository[Invitation]):
    """Repository for invitation data access operations using SQLModel."""

    default_order_by = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Invitation)

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        result = await self.session.execute(select(Invitation).where(Invitation.token == token))
        return result.scalars().first()

    async def list_by_inviter(self, inviter_id: str) -> List[Invitation]:
        stmt = (
            select(Invitation)
            .where(Invitation.inviter_id == inviter_id)
            .order_by(Invitation.created_at.desc())  # type: ignore[attr-defined]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_open(self, inviter_id: str, invitee_email: str, now: datetime) -> Optional[Invitation]:
        """Find a pending, unexpired invitation from one inviter to one address.

        Args:
            inviter_id: User who sent the invitation
            invitee_email: Address it was sent to
            now: Reference time for the expiry check

        Returns:
            The open invitation or None
        """
        stmt = (
            select(Invitation)
            .where(Invitation.inviter_id == inviter_id)
            .where(Invitation.invitee_email == invitee_email)
            .where(Invitation.status == InvitationStatus.PENDING.value)
            .where(Invitation.expires_at > now)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()
