"""Status vocabularies for the lodging domain."""

from __future__ import annotations

from enum import Enum
from typing import List


class _StrEnum(str, Enum):
    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class AvailabilityStatus(_StrEnum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    BOOKED = "booked"


class BookingStatus(_StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    CANCELLED = "cancelled"


class ConnectionStatus(_StrEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CANCELLED = "cancelled"


class InvitationStatus(_StrEnum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"
    # Returned instead of an invitation when the invitee already has an account
    CONNECTION_SENT = "connection-sent"


DEFAULT_RELATIONSHIP = "friend"
CONNECTION_REQUEST_TOKEN = "connection-request"
