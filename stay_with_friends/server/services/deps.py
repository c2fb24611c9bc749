"""
Request Dependencies.

Provides the database session, the caller's identity and a service instance
per request for API endpoints.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from stay_with_friends.core.database import engine, get_session
from stay_with_friends.core.errors import AuthenticationRequiredError

from .availabilities import AvailabilityService
from .base import Identity
from .bookings import BookingService
from .connections import ConnectionService
from .hosts import HostService
from .invitations import InvitationService
from .stats import StatsService
from .uploads import UploadService
from .users import UserService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_engine() -> AsyncEngine:
    return engine


def get_identity(
    x_user_id: Annotated[Optional[str], Header()] = None,
    x_user_email: Annotated[Optional[str], Header()] = None,
    x_user_name: Annotated[Optional[str], Header()] = None,
) -> Optional[Identity]:
    """Read the signed-in user forwarded by the frontend's auth layer."""
    if not x_user_id:
        return None
    return Identity(user_id=x_user_id, email=x_user_email, name=x_user_name)


def require_identity(identity: Annotated[Optional[Identity], Depends(get_identity)]) -> Identity:
    if identity is None:
        raise AuthenticationRequiredError()
    return identity


def get_user_service(session: SessionDep) -> UserService:
    return UserService(session)


def get_host_service(session: SessionDep) -> HostService:
    return HostService(session)


def get_availability_service(session: SessionDep) -> AvailabilityService:
    return AvailabilityService(session)


def get_booking_service(session: SessionDep) -> BookingService:
    return BookingService(session)


def get_connection_service(session: SessionDep) -> ConnectionService:
    return ConnectionService(session)


def get_invitation_service(session: SessionDep) -> InvitationService:
    return InvitationService(session)


def get_stats_service(session: SessionDep) -> StatsService:
    return StatsService(session)


def get_upload_service() -> UploadService:
    return UploadService()


EngineDep = Annotated[AsyncEngine, Depends(get_engine)]
IdentityDep = Annotated[Identity, Depends(require_identity)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
HostServiceDep = Annotated[HostService, Depends(get_host_service)]
AvailabilityServiceDep = Annotated[AvailabilityService, Depends(get_availability_service)]
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
ConnectionServiceDep = Annotated[ConnectionService, Depends(get_connection_service)]
InvitationServiceDep = Annotated[InvitationService, Depends(get_invitation_service)]
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
UploadServiceDep = Annotated[UploadService, Depends(get_upload_service)]
