"""
Invitations API Endpoints.

Onboarding new people into the inviter's network.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from stay_with_friends.core.models.io.invitations import (
    InvitationAccept,
    InvitationCreate,
    InvitationEmail,
    InvitationEmailResult,
    InvitationRead,
)
from stay_with_friends.core.models.io.users import UserRead
from stay_with_friends.server.services.deps import IdentityDep, InvitationServiceDep, require_identity

router = APIRouter(tags=["invitations"])


@router.get(
    "",
    response_model=List[InvitationRead],
    summary="List Invitations",
    description="Invitations sent by the signed-in user, newest first.",
    responses={401: {"description": "No signed-in user"}, 403: {"description": "inviter_id names someone else"}},
)
async def list_invitations(
    inviter_id: str, identity: IdentityDep, service: InvitationServiceDep
) -> List[InvitationRead]:
    return await service.list_invitations(inviter_id, identity)


@router.get(
    "/token/{token}",
    response_model=InvitationRead,
    summary="Get Invitation by Token",
    description="Look up an invitation from the token in its link. No sign-in required.",
    responses={404: {"description": "Invitation not found"}},
)
async def get_invitation_by_token(token: str, service: InvitationServiceDep) -> InvitationRead:
    return await service.get_by_token(token)


@router.post(
    "",
    response_model=InvitationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Invitation",
    description="Invite someone by email, or send a connection request if they already have an account.",
    responses={
        201: {"description": "Invitation or connection request created"},
        400: {"description": "Invalid email or message"},
        401: {"description": "No signed-in user"},
        403: {"description": "inviter_id names someone else"},
        409: {"description": "Already connected, or an open invitation exists for this email"},
    },
)
async def create_invitation(
    data: InvitationCreate, identity: IdentityDep, service: InvitationServiceDep
) -> InvitationRead:
    """
    Create an invitation.

    When **invitee_email** already belongs to a user, a pending connection is
    created instead and the response carries `status = "connection-sent"` and
    `token = "connection-request"`.
    """
    return await service.create_invitation(data, identity)


@router.post(
    "/accept",
    response_model=UserRead,
    summary="Accept Invitation",
    description="Redeem an invitation token as the signed-in user.",
    responses={
        400: {"description": "Malformed, used, cancelled or expired token"},
        401: {"description": "No signed-in user"},
        403: {"description": "The invitation was sent to another address"},
        404: {"description": "Invitation not found"},
    },
)
async def accept_invitation(data: InvitationAccept, identity: IdentityDep, service: InvitationServiceDep) -> UserRead:
    """
    Accept an invitation.

    Creates the invitee's account when needed and links it to the inviter.
    Accepting the same token again returns the same user.
    """
    return UserRead.model_validate(await service.accept_invitation(data, identity))


@router.post(
    "/send-email",
    response_model=InvitationEmailResult,
    dependencies=[Depends(require_identity)],
    summary="Send Invitation Email",
    description="Send the invitation link to an email address.",
    responses={400: {"description": "Invalid email or URL"}, 401: {"description": "No signed-in user"}},
)
async def send_invitation_email(data: InvitationEmail, service: InvitationServiceDep) -> InvitationEmailResult:
    return InvitationEmailResult(invitation_url=service.send_invitation_email(data.email, data.invitation_url))


@router.post(
    "/{invitation_id}/cancel",
    response_model=InvitationRead,
    summary="Cancel Invitation",
    description="Cancel an invitation sent by the signed-in user.",
    responses={
        401: {"description": "No signed-in user"},
        403: {"description": "The invitation was sent by someone else"},
        404: {"description": "Invitation not found"},
    },
)
async def cancel_invitation(
    invitation_id: str, identity: IdentityDep, service: InvitationServiceDep
) -> InvitationRead:
    return await service.cancel_invitation(invitation_id, identity)


@router.delete(
    "/{invitation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Invitation",
    description="Delete a pending or cancelled invitation sent by the signed-in user.",
    responses={
        400: {"description": "The invitation was already accepted"},
        401: {"description": "No signed-in user"},
        403: {"description": "The invitation was sent by someone else"},
        404: {"description": "Invitation not found"},
    },
)
async def delete_invitation(invitation_id: str, identity: IdentityDep, service: InvitationServiceDep) -> Response:
    await service.delete_invitation(invitation_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
