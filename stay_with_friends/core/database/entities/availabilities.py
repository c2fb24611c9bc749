"""
Availability entity model.

An availability is an inclusive date window on a host. Only windows whose
status is ``available`` can be booked; approving a booking flips the
overlapping windows to ``booked``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlmodel import Field

from stay_with_friends.core.models.domain.enums import AvailabilityStatus

from ..base import Base
from ..utils import new_id


class AvailabilityBase(Base):
    """Base fields for an availability window."""

    start_date: date = Field(index=True, description="First available day (inclusive)")
    end_date: date = Field(index=True, description="Last available day (inclusive)")
    status: str = Field(default=AvailabilityStatus.AVAILABLE.value, description="available, unavailable or booked")
    notes: Optional[str] = Field(default=None)


class Availability(AvailabilityBase, table=True):
    """Persistent availability window.

    Table: availabilities
    """

    __tablename__ = "availabilities"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    host_id: str = Field(foreign_key="hosts.id", index=True)

    def __repr__(self) -> str:
        return f"Availability(host_id={self.host_id}, {self.start_date}..{self.end_date}, status={self.status})"
