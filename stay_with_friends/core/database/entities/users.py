"""
User entity model.

Users are created by the invitation flow or by the frontend's auth layer the
first time someone signs in. The email address is the natural key that
invitations and connection requests are matched on.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base
from ..utils import UTCTimestamp, new_id, utc_now


class UserBase(Base):
    """Base fields for a user."""

    email: str = Field(index=True, unique=True, max_length=255, description="Sign-in email address")
    name: Optional[str] = Field(default=None, max_length=255, description="Display name")
    email_verified: Optional[datetime] = Field(
        default=None, sa_type=UTCTimestamp, description="When the email address was verified"
    )
    image: Optional[str] = Field(default=None, description="Avatar URL")


class User(UserBase, table=True):
    """Persistent user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCTimestamp)

    @property
    def display_name(self) -> str:
        return self.name or self.email

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
