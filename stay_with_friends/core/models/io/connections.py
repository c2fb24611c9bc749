"""
Connection I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .users import UserSummary


class ConnectionRead(BaseModel):
    """Schema for reading a connection.

    ``connected_user`` is the other party from the caller's point of view;
    ``requester_user`` is filled for incoming requests.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    connected_user_id: str
    relationship: Optional[str] = None
    status: str
    created_at: datetime
    connected_user: Optional[UserSummary] = None
    requester_user: Optional[UserSummary] = None


class ConnectionCreate(BaseModel):
    """Schema for sending a connection request by email."""

    user_id: Optional[str] = Field(default=None, description="Must match the signed-in user when given")
    connected_user_email: str
    relationship: Optional[str] = None


class ConnectionStatusUpdate(BaseModel):
    status: str
