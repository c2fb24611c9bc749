"""
I/O models for API requests and responses.

Pydantic schemas that define the contract between the API and its clients,
one module per resource.
"""

from .availabilities import AvailabilityCreate, AvailabilityInput, AvailabilityRead, HostSummary
from .booking_requests import BookingRequestCreate, BookingRequestRead, BookingStatusUpdate, PendingCount
from .connections import ConnectionCreate, ConnectionRead, ConnectionStatusUpdate
from .hosts import HostCreate, HostRead, HostUpdate
from .invitations import InvitationAccept, InvitationCreate, InvitationEmail, InvitationEmailResult, InvitationRead
from .stats import CountResult, SiteStats, UploadResult
from .users import EmailCheck, EmailCheckResult, UserCreate, UserRead, UserSummary, UserUpdate

__all__ = [
    "AvailabilityCreate",
    "AvailabilityInput",
    "AvailabilityRead",
    "BookingRequestCreate",
    "BookingRequestRead",
    "BookingStatusUpdate",
    "ConnectionCreate",
    "ConnectionRead",
    "ConnectionStatusUpdate",
    "CountResult",
    "EmailCheck",
    "EmailCheckResult",
    "HostCreate",
    "HostRead",
    "HostSummary",
    "HostUpdate",
    "InvitationAccept",
    "InvitationCreate",
    "InvitationEmail",
    "InvitationEmailResult",
    "InvitationRead",
    "PendingCount",
    "SiteStats",
    "UploadResult",
    "UserCreate",
    "UserRead",
    "UserSummary",
    "UserUpdate",
]
