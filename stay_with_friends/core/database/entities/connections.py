"""
Connection entity model.

Connections form the trusted network. A row points from ``user_id`` to
``connected_user_id``; an accepted friendship is stored as one accepted row
per direction.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from stay_with_friends.core.models.domain.enums import ConnectionStatus

from ..base import Base
from ..utils import UTCTimestamp, new_id, utc_now


class Connection(Base, table=True):
    """Persistent connection between two users.

    Table: connections
    """

    __tablename__ = "connections"
    __table_args__ = (
        UniqueConstraint("user_id", "connected_user_id", name="uq_connections_pair"),
        {"extend_existing": True},
    )

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True, description="User who sent the request")
    connected_user_id: str = Field(foreign_key="users.id", index=True, description="User who received it")
    relationship: Optional[str] = Field(default=None, description="Label such as 'friend' or 'family'")
    status: str = Field(default=ConnectionStatus.PENDING.value, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCTimestamp)

    def involves(self, user_id: str) -> bool:
        return user_id in (self.user_id, self.connected_user_id)

    def other_party(self, user_id: str) -> str:
        return self.connected_user_id if self.user_id == user_id else self.user_id

    def __repr__(self) -> str:
        return f"Connection({self.user_id} -> {self.connected_user_id}, status={self.status})"
