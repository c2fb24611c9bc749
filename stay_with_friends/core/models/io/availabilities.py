"""
Availability I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HostSummary(BaseModel):
    """Compact host embedded in availability and booking responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    location: Optional[str] = None
    description: Optional[str] = None
    user_id: Optional[str] = None


class AvailabilityRead(BaseModel):
    """Schema for reading an availability window."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    host_id: str
    start_date: date
    end_date: date
    status: str
    notes: Optional[str] = None
    host: Optional[HostSummary] = None


class AvailabilityCreate(BaseModel):
    """Schema for creating an availability window on a host."""

    host_id: str = Field(description="Host the window belongs to")
    start_date: str = Field(description="First available day, YYYY-MM-DD")
    end_date: str = Field(description="Last available day, YYYY-MM-DD")
    status: Optional[str] = Field(default=None, description="available (default), unavailable or booked")
    notes: Optional[str] = None


class AvailabilityInput(BaseModel):
    """Window supplied inline when a host's availabilities are replaced."""

    start_date: str
    end_date: str
    status: Optional[str] = None
    notes: Optional[str] = None
