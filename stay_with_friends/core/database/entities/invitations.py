"""
Invitation entity model.

Invitations bring people without an account into the network. Each one
carries a random token that the invitee redeems before ``expires_at``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from stay_with_friends.core.models.domain.enums import InvitationStatus

from ..base import Base
from ..utils import UTCTimestamp, new_id, utc_now


class Invitation(Base, table=True):
    """Persistent invitation.

    Table: invitations
    """

    __tablename__ = "invitations"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    inviter_id: str = Field(foreign_key="users.id", index=True)
    invitee_email: str = Field(index=True, description="Address the invitation was sent to")
    message: Optional[str] = Field(default=None)
    token: str = Field(unique=True, index=True, description="Hex token embedded in the invitation link")
    status: str = Field(default=InvitationStatus.PENDING.value, index=True)
    expires_at: datetime = Field(sa_type=UTCTimestamp)
    accepted_at: Optional[datetime] = Field(default=None, sa_type=UTCTimestamp)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCTimestamp)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    def __repr__(self) -> str:
        return f"Invitation(id={self.id}, invitee={self.invitee_email}, status={self.status})"
