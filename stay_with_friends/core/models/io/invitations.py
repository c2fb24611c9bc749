"""
Invitation I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .users import UserSummary


class InvitationRead(BaseModel):
    """Schema for reading an invitation.

    When the invitee already had an account, the API answers with a
    connection request instead; that response uses ``status='connection-sent'``
    and ``token='connection-request'``.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    inviter_id: str
    invitee_email: str
    message: Optional[str] = None
    token: str
    status: str
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    created_at: datetime
    inviter: Optional[UserSummary] = None


class InvitationCreate(BaseModel):
    """Schema for inviting someone by email."""

    inviter_id: Optional[str] = Field(default=None, description="Must match the signed-in user when given")
    invitee_email: str
    message: Optional[str] = None


class InvitationAccept(BaseModel):
    """Schema for redeeming an invitation token."""

    token: str
    name: Optional[str] = None
    image: Optional[str] = None


class InvitationEmail(BaseModel):
    email: str
    invitation_url: str


class InvitationEmailResult(BaseModel):
    invitation_url: str
