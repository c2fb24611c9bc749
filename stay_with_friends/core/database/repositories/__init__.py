"""
Repository layer.

One repository per table, all built on ``SqlRepository``. Repositories flush
but never commit; callers own the transaction.
"""

from .availabilities import AvailabilityRepository
from .base import AsyncBaseRepository, QueryBuilder, SqlRepository
from .booking_requests import BookingRequestRepository
from .connections import ConnectionRepository
from .hosts import HostRepository
from .invitations import InvitationRepository
from .stats import StatsRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "AvailabilityRepository",
    "BookingRequestRepository",
    "ConnectionRepository",
    "HostRepository",
    "InvitationRepository",
    "QueryBuilder",
    "SqlRepository",
    "StatsRepository",
    "UserRepository",
]
