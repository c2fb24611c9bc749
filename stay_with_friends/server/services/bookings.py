"""
Booking service.

Guests request stays; hosts approve or decline them. Approving a request
marks the host's overlapping available windows as booked.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database.entities.availabilities import Availability
from stay_with_friends.core.database.entities.booking_requests import BookingRequest
from stay_with_friends.core.database.entities.hosts import Host
from stay_with_friends.core.database.repositories import (
    AvailabilityRepository,
    BookingRequestRepository,
    HostRepository,
    UserRepository,
)
from stay_with_friends.core.database.utils import utc_now
from stay_with_friends.core.errors import NotFoundError, PermissionDeniedError, ValidationError
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.models.domain.enums import AvailabilityStatus, BookingStatus
from stay_with_friends.core.models.io.availabilities import HostSummary
from stay_with_friends.core.models.io.booking_requests import (
    BookingRequestCreate,
    BookingRequestRead,
    BookingStatusUpdate,
)
from stay_with_friends.core.models.io.users import UserSummary
from stay_with_friends.core.monitoring import log_domain_event
from stay_with_friends.core.validation import (
    validate_date_range,
    validate_optional_text,
    validate_positive_integer,
    validate_status,
)

from .base import BaseService, Identity

logger = get_logger(__name__)

MAX_GUESTS = 50


class BookingService(BaseService):
    """Business rules for booking requests."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.hosts = HostRepository(session)
        self.users = UserRepository(session)
        self.availabilities = AvailabilityRepository(session)
        self.bookings = BookingRequestRepository(session)

    async def _to_reads(self, bookings: List[BookingRequest]) -> List[BookingRequestRead]:
        hosts = {}
        for host_id in {b.host_id for b in bookings}:
            host = await self.hosts.get_by_id(host_id)
            if host is not None:
                hosts[host_id] = HostSummary.model_validate(host)
        users = {u.id: UserSummary.model_validate(u) for u in await self.users.get_many(b.requester_id for b in bookings)}
        return [
            BookingRequestRead.model_validate(b).model_copy(
                update={"host": hosts.get(b.host_id), "requester": users.get(b.requester_id)}
            )
            for b in bookings
        ]

    async def _to_read(self, booking: BookingRequest) -> BookingRequestRead:
        return (await self._to_reads([booking]))[0]

    async def _get_host(self, host_id: str) -> Host:
        host = await self.hosts.get_by_id(host_id)
        if host is None:
            raise NotFoundError("Host")
        return host

    async def _get_booking(self, booking_id: str) -> BookingRequest:
        booking = await self.bookings.get_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking request")
        return booking

    async def create_booking(self, data: BookingRequestCreate, identity: Identity) -> BookingRequestRead:
        """Request a stay at a host for the caller.

        Raises:
            PermissionDeniedError: If ``requester_id`` names someone else
            NotFoundError: If the host does not exist
            ValidationError: If the range or guest count is invalid
        """
        identity.require_self(data.requester_id, "Unauthorized: Can only create booking requests for yourself")
        host = await self._get_host(data.host_id)
        start, end = validate_date_range(data.start_date, data.end_date)
        validate_positive_integer(data.guests, "Guests count", MAX_GUESTS, minimum=1)
        if host.max_guests is not None and data.guests > host.max_guests:
            raise ValidationError(f"Guests count must be no more than {host.max_guests}")
        validate_optional_text(data.message, "Message", 1000)

        booking = BookingRequest(
            host_id=host.id,
            requester_id=identity.user_id,
            start_date=start,
            end_date=end,
            guests=data.guests,
            message=data.message,
        )
        async with self.transaction():
            await self.bookings.create(booking)
        log_domain_event("booking.created", booking_id=booking.id, host_id=host.id, requester_id=identity.user_id)
        return await self._to_read(booking)

    async def get_booking(self, booking_id: str, identity: Identity) -> BookingRequestRead:
        booking = await self._get_booking(booking_id)
        if booking.requester_id != identity.user_id:
            host = await self.hosts.get_by_id(booking.host_id)
            if host is None or host.user_id != identity.user_id:
                raise PermissionDeniedError("Unauthorized: Can only view your own booking requests")
        return await self._to_read(booking)

    async def list_for_host(self, host_id: str, identity: Identity) -> List[BookingRequestRead]:
        host = await self._get_host(host_id)
        if host.user_id != identity.user_id:
            raise PermissionDeniedError("Unauthorized: Can only view booking requests for your own hosts")
        return await self._to_reads(await self.bookings.list_by_host(host_id))

    async def list_for_requester(self, requester_id: str, identity: Identity) -> List[BookingRequestRead]:
        identity.require_self(requester_id, "Unauthorized: Can only view your own booking requests")
        return await self._to_reads(await self.bookings.list_by_requester(requester_id))

    async def list_for_host_user(self, user_id: str, identity: Identity) -> List[BookingRequestRead]:
        identity.require_self(user_id, "Unauthorized: Can only view booking requests for your own hosts")
        return await self._to_reads(await self.bookings.list_for_host_owner(user_id))

    async def pending_count(self, user_id: str, identity: Identity) -> int:
        identity.require_self(user_id, "Unauthorized: Can only view your own pending requests count")
        return await self.bookings.count_pending_for_host_owner(user_id)

    async def update_status(self, booking_id: str, data: BookingStatusUpdate, identity: Identity) -> BookingRequestRead:
        """Answer a booking request, or let the guest cancel it.

        The host owner may set any status. The requester may only cancel.
        On approval the host's available windows that overlap the stay become
        ``booked``; if none overlap, a booked window is added for the stay.
        Approving an already approved request leaves the windows alone.

        Raises:
            NotFoundError: If the booking request does not exist
            PermissionDeniedError: If the caller is neither host owner nor requester
            ValidationError: If the status is unknown
        """
        validate_status(data.status, BookingStatus.values())
        if not data.status:
            raise ValidationError("Status is required")
        validate_optional_text(data.response_message, "Response message", 1000)

        booking = await self._get_booking(booking_id)
        host = await self._get_host(booking.host_id)
        is_host = host.user_id == identity.user_id
        is_guest_cancelling = booking.requester_id == identity.user_id and data.status == BookingStatus.CANCELLED.value
        if not (is_host or is_guest_cancelling):
            raise PermissionDeniedError("Unauthorized: Can only update booking requests for your own hosts")

        # Windows are booked once, on the transition into approved.
        newly_approved = data.status == BookingStatus.APPROVED.value and booking.status != BookingStatus.APPROVED.value
        async with self.transaction():
            booking.status = data.status
            if is_host:
                booking.response_message = data.response_message
                booking.responded_at = utc_now()
            await self.bookings.update(booking)
            if newly_approved:
                await self._mark_booked(booking)

        log_domain_event("booking.status_changed", booking_id=booking.id, status=booking.status)
        return await self._to_read(booking)

    async def _mark_booked(self, booking: BookingRequest) -> None:
        requester = await self.users.get_by_id(booking.requester_id)
        note = f"Booked by {requester.display_name if requester else booking.requester_id}"
        overlapping = await self.availabilities.list_overlapping(
            booking.start_date, booking.end_date, host_id=booking.host_id
        )
        if not overlapping:
            await self.availabilities.create(
                Availability(
                    host_id=booking.host_id,
                    start_date=booking.start_date,
                    end_date=booking.end_date,
                    status=AvailabilityStatus.BOOKED.value,
                    notes=note,
                )
            )
            logger.debug(f"No open window for booking {booking.id}, added a booked window")
            return
        for window in overlapping:
            window.status = AvailabilityStatus.BOOKED.value
            window.notes = note
            await self.availabilities.update(window)
