"""
Booking request I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .availabilities import HostSummary
from .users import UserSummary


class BookingRequestRead(BaseModel):
    """Schema for reading a booking request."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    host_id: str
    requester_id: str
    start_date: date
    end_date: date
    guests: int
    message: Optional[str] = None
    status: str
    response_message: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: datetime
    host: Optional[HostSummary] = None
    requester: Optional[UserSummary] = None


class BookingRequestCreate(BaseModel):
    """Schema for requesting a stay."""

    host_id: str
    requester_id: Optional[str] = Field(default=None, description="Must match the signed-in user when given")
    start_date: str = Field(description="Arrival day, YYYY-MM-DD")
    end_date: str = Field(description="Departure day, YYYY-MM-DD")
    guests: int = Field(default=1)
    message: Optional[str] = None


class BookingStatusUpdate(BaseModel):
    """Schema for answering or cancelling a booking request."""

    status: str
    response_message: Optional[str] = None


class PendingCount(BaseModel):
    count: int
