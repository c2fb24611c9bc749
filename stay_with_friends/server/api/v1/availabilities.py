"""
Availabilities API Endpoints.

Publishing availability windows and querying who is free when.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from stay_with_friends.core.models.io.availabilities import AvailabilityCreate, AvailabilityRead
from stay_with_friends.server.services.deps import AvailabilityServiceDep, IdentityDep

router = APIRouter(tags=["availabilities"])


@router.get(
    "/by-date",
    response_model=List[AvailabilityRead],
    summary="Availabilities on a Date",
    description="Retrieve the available windows that cover one day, with their host.",
    responses={400: {"description": "Missing or malformed date"}},
)
async def availabilities_by_date(date: str, service: AvailabilityServiceDep) -> List[AvailabilityRead]:
    return await service.by_date(date)


@router.get(
    "/by-date-range",
    response_model=List[AvailabilityRead],
    summary="Availabilities in a Date Range",
    description="Retrieve the available windows that intersect an inclusive date range, with their host.",
    responses={400: {"description": "Missing, malformed or inverted range"}},
)
async def availabilities_by_date_range(
    start_date: str, end_date: str, service: AvailabilityServiceDep
) -> List[AvailabilityRead]:
    return await service.by_date_range(start_date, end_date)


@router.get(
    "/dates",
    response_model=List[str],
    summary="Available Dates",
    description="List the days in a range that at least one host has available.",
    response_description="Sorted `YYYY-MM-DD` strings without duplicates.",
    responses={400: {"description": "Missing, malformed or inverted range"}},
)
async def availability_dates(start_date: str, end_date: str, service: AvailabilityServiceDep) -> List[str]:
    return await service.available_dates(start_date, end_date)


@router.post(
    "",
    response_model=AvailabilityRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Availability",
    description="Publish an availability window on a listing owned by the signed-in user.",
    responses={
        201: {"description": "Window created successfully"},
        400: {"description": "Invalid range, status or notes"},
        401: {"description": "No signed-in user"},
        403: {"description": "The listing belongs to someone else"},
        404: {"description": "Host not found"},
    },
)
async def create_availability(
    data: AvailabilityCreate, identity: IdentityDep, service: AvailabilityServiceDep
) -> AvailabilityRead:
    """
    Create an availability window.

    - **start_date** / **end_date**: Inclusive `YYYY-MM-DD` bounds.
    - **status**: `available` (default), `unavailable` or `booked`.
    - **notes**: Up to 500 characters.
    """
    return await service.create_availability(data, identity)
