"""
Booking Requests API Endpoints.

Guests request stays; host owners answer them.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from stay_with_friends.core.models.io.booking_requests import (
    BookingRequestCreate,
    BookingRequestRead,
    BookingStatusUpdate,
    PendingCount,
)
from stay_with_friends.server.services.deps import BookingServiceDep, IdentityDep

router = APIRouter(tags=["booking-requests"])

AUTH_RESPONSES = {
    401: {"description": "No signed-in user"},
    403: {"description": "The caller may not see these booking requests"},
}


@router.post(
    "",
    response_model=BookingRequestRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Booking Request",
    description="Request a stay at a host for the signed-in user.",
    responses={
        201: {"description": "Booking request created"},
        400: {"description": "Invalid range or guest count"},
        404: {"description": "Host not found"},
        **AUTH_RESPONSES,
    },
)
async def create_booking_request(
    data: BookingRequestCreate, identity: IdentityDep, service: BookingServiceDep
) -> BookingRequestRead:
    """
    Create a booking request.

    - **host_id**: Listing to stay at.
    - **start_date** / **end_date**: Inclusive `YYYY-MM-DD` bounds.
    - **guests**: Between 1 and 50, and no more than the listing's max guests.
    - **message**: Optional note to the host.
    """
    return await service.create_booking(data, identity)


@router.get(
    "/host/{host_id}",
    response_model=List[BookingRequestRead],
    summary="Booking Requests for a Host",
    description="Booking requests for one listing owned by the signed-in user, newest first.",
    responses={404: {"description": "Host not found"}, **AUTH_RESPONSES},
)
async def booking_requests_by_host(
    host_id: str, identity: IdentityDep, service: BookingServiceDep
) -> List[BookingRequestRead]:
    return await service.list_for_host(host_id, identity)


@router.get(
    "/requester/{requester_id}",
    response_model=List[BookingRequestRead],
    summary="Booking Requests by Requester",
    description="Booking requests sent by the signed-in user, newest first.",
    responses=AUTH_RESPONSES,
)
async def booking_requests_by_requester(
    requester_id: str, identity: IdentityDep, service: BookingServiceDep
) -> List[BookingRequestRead]:
    return await service.list_for_requester(requester_id, identity)


@router.get(
    "/host-user/{user_id}",
    response_model=List[BookingRequestRead],
    summary="Booking Requests for a Host Owner",
    description="Booking requests across every listing the signed-in user owns, newest first.",
    responses=AUTH_RESPONSES,
)
async def booking_requests_by_host_user(
    user_id: str, identity: IdentityDep, service: BookingServiceDep
) -> List[BookingRequestRead]:
    return await service.list_for_host_user(user_id, identity)


@router.get(
    "/pending-count/{user_id}",
    response_model=PendingCount,
    summary="Pending Booking Count",
    description="Number of pending booking requests across the signed-in user's listings.",
    responses=AUTH_RESPONSES,
)
async def pending_booking_requests_count(user_id: str, identity: IdentityDep, service: BookingServiceDep) -> PendingCount:
    return PendingCount(count=await service.pending_count(user_id, identity))


@router.get(
    "/{booking_id}",
    response_model=BookingRequestRead,
    summary="Get Booking Request",
    description="Retrieve a booking request visible to its requester or the host owner.",
    responses={404: {"description": "Booking request not found"}, **AUTH_RESPONSES},
)
async def get_booking_request(booking_id: str, identity: IdentityDep, service: BookingServiceDep) -> BookingRequestRead:
    return await service.get_booking(booking_id, identity)


@router.put(
    "/{booking_id}/status",
    response_model=BookingRequestRead,
    summary="Update Booking Status",
    description="Approve, decline or cancel a booking request.",
    responses={
        400: {"description": "Unknown status"},
        404: {"description": "Booking request not found"},
        **AUTH_RESPONSES,
    },
)
async def update_booking_request_status(
    booking_id: str, data: BookingStatusUpdate, identity: IdentityDep, service: BookingServiceDep
) -> BookingRequestRead:
    """
    Update the status of a booking request.

    The host owner may set any status; the requester may only set `cancelled`.
    Approving marks the host's overlapping available windows as `booked`.
    """
    return await service.update_status(booking_id, data, identity)
