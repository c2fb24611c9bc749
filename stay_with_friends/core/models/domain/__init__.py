from .enums import (
    CONNECTION_REQUEST_TOKEN,
    DEFAULT_RELATIONSHIP,
    AvailabilityStatus,
    BookingStatus,
    ConnectionStatus,
    InvitationStatus,
)

__all__ = [
    "CONNECTION_REQUEST_TOKEN",
    "DEFAULT_RELATIONSHIP",
    "AvailabilityStatus",
    "BookingStatus",
    "ConnectionStatus",
    "InvitationStatus",
]
