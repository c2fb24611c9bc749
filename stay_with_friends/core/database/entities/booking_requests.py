"""
Booking request entity model.

A booking request is a guest asking a host for a stay over an inclusive date
range. The host answers by approving or declining it.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlmodel import Field

from stay_with_friends.core.models.domain.enums import BookingStatus

from ..base import Base
from ..utils import UTCTimestamp, new_id, utc_now


class BookingRequestBase(Base):
    """Base fields for a booking request."""

    start_date: date = Field(description="Arrival day (inclusive)")
    end_date: date = Field(description="Departure day (inclusive)")
    guests: int = Field(description="Number of guests")
    message: Optional[str] = Field(default=None, description="Note from the requester")


class BookingRequest(BookingRequestBase, table=True):
    """Persistent booking request.

    Table: booking_requests
    """

    __tablename__ = "booking_requests"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    host_id: str = Field(foreign_key="hosts.id", index=True)
    requester_id: str = Field(foreign_key="users.id", index=True)
    status: str = Field(default=BookingStatus.PENDING.value, index=True)
    response_message: Optional[str] = Field(default=None, description="Reply from the host")
    responded_at: Optional[datetime] = Field(default=None, sa_type=UTCTimestamp)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCTimestamp)

    def __repr__(self) -> str:
        return f"BookingRequest(id={self.id}, host_id={self.host_id}, status={self.status})"
