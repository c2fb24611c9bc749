"""
Connections API Endpoints.

The trusted network: accepted connections and incoming requests.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from stay_with_friends.core.models.io.connections import ConnectionCreate, ConnectionRead, ConnectionStatusUpdate
from stay_with_friends.server.services.deps import ConnectionServiceDep, IdentityDep

router = APIRouter(tags=["connections"])


@router.get(
    "/connections",
    response_model=List[ConnectionRead],
    summary="List Connections",
    description="Accepted connections of the signed-in user, one per connected person.",
    responses={401: {"description": "No signed-in user"}, 403: {"description": "user_id names someone else"}},
)
async def list_connections(user_id: str, identity: IdentityDep, service: ConnectionServiceDep) -> List[ConnectionRead]:
    return await service.list_connections(user_id, identity)


@router.get(
    "/connection-requests/{user_id}",
    response_model=List[ConnectionRead],
    summary="List Connection Requests",
    description="Pending connection requests addressed to the signed-in user, newest first.",
    responses={401: {"description": "No signed-in user"}, 403: {"description": "user_id names someone else"}},
)
async def list_connection_requests(
    user_id: str, identity: IdentityDep, service: ConnectionServiceDep
) -> List[ConnectionRead]:
    return await service.list_requests(user_id, identity)


@router.post(
    "/connections",
    response_model=ConnectionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Connection",
    description="Send a connection request to the user registered under an email address.",
    responses={
        201: {"description": "Connection request created"},
        400: {"description": "Invalid email or relationship, or a request to oneself"},
        401: {"description": "No signed-in user"},
        403: {"description": "user_id names someone else"},
        404: {"description": "No user with this email"},
        409: {"description": "The users are already connected or have a pending request"},
    },
)
async def create_connection(
    data: ConnectionCreate, identity: IdentityDep, service: ConnectionServiceDep
) -> ConnectionRead:
    return await service.create_connection(data, identity)


@router.put(
    "/connections/{connection_id}/status",
    response_model=ConnectionRead,
    summary="Update Connection Status",
    description="Accept, decline or cancel a connection the signed-in user is part of.",
    responses={
        400: {"description": "Unknown status"},
        401: {"description": "No signed-in user"},
        403: {"description": "The caller is not part of this connection"},
        404: {"description": "Connection not found"},
    },
)
async def update_connection_status(
    connection_id: str, data: ConnectionStatusUpdate, identity: IdentityDep, service: ConnectionServiceDep
) -> ConnectionRead:
    return await service.update_status(connection_id, data.status, identity)


@router.delete(
    "/connections/{connection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove Connection",
    description="Remove an accepted connection in both directions.",
    responses={
        400: {"description": "The connection is not accepted"},
        401: {"description": "No signed-in user"},
        403: {"description": "The caller is not part of this connection"},
        404: {"description": "Connection not found"},
    },
)
async def delete_connection(connection_id: str, identity: IdentityDep, service: ConnectionServiceDep) -> Response:
    await service.delete_connection(connection_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
