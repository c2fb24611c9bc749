"""
Hosts API Endpoints.

Listings, their availability windows and the guest-facing search.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Response, status

from stay_with_friends.core.models.io.availabilities import AvailabilityRead
from stay_with_friends.core.models.io.hosts import HostCreate, HostRead, HostUpdate
from stay_with_friends.server.services.deps import HostServiceDep, IdentityDep

router = APIRouter(tags=["hosts"])


@router.get(
    "",
    response_model=List[HostRead],
    summary="List Hosts",
    description="Retrieve every listing with its availability windows, ordered by name.",
)
async def list_hosts(service: HostServiceDep) -> List[HostRead]:
    return await service.list_hosts()


@router.get(
    "/search",
    response_model=List[HostRead],
    summary="Search Hosts",
    description="Search listings by text and optionally by arrival date.",
    responses={400: {"description": "Malformed start date"}},
)
async def search_hosts(
    service: HostServiceDep,
    query: Optional[str] = None,
    start_date: Optional[str] = None,
) -> List[HostRead]:
    """
    Search hosts.

    - **query**: Case-insensitive substring of name, description, location, city or state.
    - **start_date**: `YYYY-MM-DD`; only hosts with an available window covering this day are returned.
    """
    return await service.search_hosts(query, start_date)


@router.get(
    "/{host_id}",
    response_model=HostRead,
    summary="Get Host",
    description="Retrieve one listing with its availability windows.",
    responses={404: {"description": "Host not found"}},
)
async def get_host(host_id: str, service: HostServiceDep) -> HostRead:
    return await service.get_host(host_id)


@router.get(
    "/{host_id}/availabilities",
    response_model=List[AvailabilityRead],
    summary="List Host Availabilities",
    description="Retrieve a listing's availability windows ordered by start date.",
    responses={404: {"description": "Host not found"}},
)
async def host_availabilities(host_id: str, service: HostServiceDep) -> List[AvailabilityRead]:
    return await service.host_availabilities(host_id)


@router.post(
    "",
    response_model=HostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Host",
    description="Create a listing owned by the signed-in user.",
    responses={
        201: {"description": "Host created successfully"},
        400: {"description": "A field breaks the listing rules"},
        401: {"description": "No signed-in user"},
        403: {"description": "user_id names someone else"},
    },
)
async def create_host(data: HostCreate, identity: IdentityDep, service: HostServiceDep) -> HostRead:
    """
    Create a host.

    **amenities** and **photos** accept a list of strings or a JSON encoded list.
    """
    return await service.create_host(data, identity)


@router.patch(
    "/{host_id}",
    response_model=HostRead,
    summary="Update Host",
    description="Partially update a listing owned by the signed-in user.",
    responses={
        400: {"description": "A field breaks the listing rules"},
        401: {"description": "No signed-in user"},
        403: {"description": "The listing belongs to someone else"},
        404: {"description": "Host not found"},
    },
)
async def update_host(host_id: str, data: HostUpdate, identity: IdentityDep, service: HostServiceDep) -> HostRead:
    """
    Update a host.

    Only the fields present in the body change. When **availabilities** is
    given it replaces every window on the listing. Uploaded photos dropped
    from **photos** are deleted from storage.
    """
    return await service.update_host(host_id, data, identity)


@router.delete(
    "/{host_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Host",
    description="Delete a listing together with its availability windows and booking requests.",
    responses={
        401: {"description": "No signed-in user"},
        403: {"description": "The listing belongs to someone else"},
        404: {"description": "Host not found"},
    },
)
async def delete_host(host_id: str, identity: IdentityDep, service: HostServiceDep) -> Response:
    await service.delete_host(host_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
