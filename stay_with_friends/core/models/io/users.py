"""
User I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: Optional[str] = None
    email_verified: Optional[datetime] = None
    image: Optional[str] = None
    created_at: datetime


class UserSummary(BaseModel):
    """Compact user embedded in connections and booking requests."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: Optional[str] = None
    image: Optional[str] = None


class UserCreate(BaseModel):
    """Schema for creating a user via the API."""

    email: str = Field(description="Sign-in email address")
    name: Optional[str] = Field(default=None, description="Display name")
    image: Optional[str] = Field(default=None, description="Avatar URL")


class UserUpdate(BaseModel):
    """Schema for updating the signed-in user's profile."""

    name: Optional[str] = None
    image: Optional[str] = None


class EmailCheck(BaseModel):
    email: str


class EmailCheckResult(BaseModel):
    exists: bool
