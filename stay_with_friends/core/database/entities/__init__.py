"""
Database entity models.

Each module holds one table:

- users: User accounts
- hosts: Host listings
- availabilities: Date windows on a host
- booking_requests: Stay requests from guests to hosts
- connections: Directed trusted-network edges between users
- invitations: Token based invitations for people without an account
"""

from . import (
    availabilities,
    booking_requests,
    connections,
    hosts,
    invitations,
    users,
)
from .availabilities import Availability
from .booking_requests import BookingRequest
from .connections import Connection
from .hosts import Host
from .invitations import Invitation
from .users import User

__all__ = [
    "Availability",
    "BookingRequest",
    "Connection",
    "Host",
    "Invitation",
    "User",
    "availabilities",
    "booking_requests",
    "connections",
    "hosts",
    "invitations",
    "users",
]
