"""
Invitation service.

Invitations onboard people into the inviter's network. Inviting someone who
already has an account sends them a connection request instead.
"""

from __future__ import annotations

import re
import secrets
from datetime import timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database.entities.connections import Connection
from stay_with_friends.core.database.entities.invitations import Invitation
from stay_with_friends.core.database.entities.users import User
from stay_with_friends.core.database.repositories import (
    ConnectionRepository,
    InvitationRepository,
    UserRepository,
)
from stay_with_friends.core.database.utils import new_id, utc_now
from stay_with_friends.core.errors import ConflictError, NotFoundError, PermissionDeniedError, ValidationError
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.models.domain.enums import (
    CONNECTION_REQUEST_TOKEN,
    DEFAULT_RELATIONSHIP,
    ConnectionStatus,
    InvitationStatus,
)
from stay_with_friends.core.models.io.invitations import InvitationAccept, InvitationCreate, InvitationRead
from stay_with_friends.core.models.io.users import UserSummary
from stay_with_friends.core.monitoring import log_domain_event
from stay_with_friends.core.validation import validate_email, validate_name, validate_optional_text, validate_url
from stay_with_friends.server.core.config import settings

from .base import BaseService, Identity
from .mail import MailOutbox, invitation_email_body, outbox

logger = get_logger(__name__)

TOKEN_PATTERN = re.compile(r"^[0-9a-f]{64}$")


def generate_token() -> str:
    """32 random bytes, hex encoded."""
    return secrets.token_hex(32)


class InvitationService(BaseService):
    """Business rules for invitations."""

    def __init__(self, session: AsyncSession, ttl_days: Optional[int] = None, mail: Optional[MailOutbox] = None) -> None:
        super().__init__(session)
        self.users = UserRepository(session)
        self.connections = ConnectionRepository(session)
        self.invitations = InvitationRepository(session)
        self.ttl_days = ttl_days if ttl_days is not None else settings.invitation_ttl_days
        self.mail = mail or outbox

    async def _to_reads(self, invitations: List[Invitation]) -> List[InvitationRead]:
        users = {u.id: UserSummary.model_validate(u) for u in await self.users.get_many(i.inviter_id for i in invitations)}
        return [
            InvitationRead.model_validate(i).model_copy(update={"inviter": users.get(i.inviter_id)})
            for i in invitations
        ]

    async def _get_own(self, invitation_id: str, identity: Identity, action: str) -> Invitation:
        invitation = await self.invitations.get_by_id(invitation_id)
        if invitation is None:
            raise NotFoundError("Invitation")
        if invitation.inviter_id != identity.user_id:
            raise PermissionDeniedError(f"Unauthorized: Can only {action} your own invitations")
        return invitation

    async def create_invitation(self, data: InvitationCreate, identity: Identity) -> InvitationRead:
        """Invite someone by email.

        Args:
            data: Invitee address and optional message
            identity: Signed-in inviter

        Returns:
            The stored invitation, or a ``connection-sent`` record when the
            address already belongs to a user

        Raises:
            ConflictError: If the users are already linked, or if an open
                invitation from this inviter to this address exists
        """
        identity.require_self(data.inviter_id, "Unauthorized: Can only create invitations for yourself")
        validate_email(data.invitee_email)
        validate_optional_text(data.message, "Invitation message", 500)
        now = utc_now()

        existing_user = await self.users.get_by_email(data.invitee_email)
        if existing_user is not None:
            return await self._send_connection_request(data, existing_user, identity)

        if await self.invitations.find_open(identity.user_id, data.invitee_email, now) is not None:
            raise ConflictError("A pending invitation already exists for this email")

        invitation = Invitation(
            inviter_id=identity.user_id,
            invitee_email=data.invitee_email,
            message=data.message,
            token=generate_token(),
            expires_at=now + timedelta(days=self.ttl_days),
        )
        async with self.transaction():
            await self.invitations.create(invitation)
        log_domain_event("invitation.created", invitation_id=invitation.id, inviter_id=identity.user_id)
        return (await self._to_reads([invitation]))[0]

    async def _send_connection_request(self, data: InvitationCreate, target: User, identity: Identity) -> InvitationRead:
        if target.id == identity.user_id:
            raise ValidationError("You cannot invite yourself")
        if await self.connections.get_between(identity.user_id, target.id) is not None:
            raise ConflictError("Users are already connected or have a pending connection")

        connection = Connection(
            user_id=identity.user_id,
            connected_user_id=target.id,
            relationship=DEFAULT_RELATIONSHIP,
            status=ConnectionStatus.PENDING.value,
        )
        async with self.transaction():
            await self.connections.create(connection)
        log_domain_event("connection.requested", connection_id=connection.id, user_id=identity.user_id, via="invitation")

        inviter = await self.users.get_by_id(identity.user_id)
        return InvitationRead(
            id=connection.id,
            inviter_id=identity.user_id,
            invitee_email=data.invitee_email,
            message=data.message or f"Connection request sent to {target.display_name}",
            token=CONNECTION_REQUEST_TOKEN,
            status=InvitationStatus.CONNECTION_SENT.value,
            expires_at=connection.created_at,
            created_at=connection.created_at,
            inviter=UserSummary.model_validate(inviter) if inviter else None,
        )

    async def get_by_token(self, token: str) -> InvitationRead:
        invitation = await self.invitations.get_by_token(token)
        if invitation is None:
            raise NotFoundError("Invitation")
        return (await self._to_reads([invitation]))[0]

    async def list_invitations(self, inviter_id: str, identity: Identity) -> List[InvitationRead]:
        identity.require_self(inviter_id, "Unauthorized: Can only view your own invitations")
        return await self._to_reads(await self.invitations.list_by_inviter(inviter_id))

    async def accept_invitation(self, data: InvitationAccept, identity: Identity) -> User:
        """Redeem an invitation token for the signed-in user.

        A first acceptance creates the invitee's user row (if missing) and
        links them to the inviter. Accepting an accepted token again returns
        the same user without writing anything.

        Raises:
            ValidationError: If the token is malformed, used up or expired
            NotFoundError: If no invitation carries the token
            PermissionDeniedError: If the invitation was sent to another address
        """
        if not data.token or not TOKEN_PATTERN.match(data.token):
            raise ValidationError("Invalid token format")
        invitation = await self.invitations.get_by_token(data.token)
        if invitation is None:
            raise NotFoundError("Invitation")
        if identity.email is None or identity.email.lower() != invitation.invitee_email.lower():
            raise PermissionDeniedError("Unauthorized: Can only accept invitations sent to your email")

        if invitation.status == InvitationStatus.ACCEPTED.value:
            user = await self.users.get_by_email(invitation.invitee_email)
            if user is not None:
                logger.debug(f"Invitation {invitation.id} already accepted, returning user {user.id}")
                return user

        now = utc_now()
        if invitation.status not in (InvitationStatus.PENDING.value, InvitationStatus.ACCEPTED.value):
            raise ValidationError("Invitation has already been used or cancelled")
        if invitation.is_expired(now):
            raise ValidationError("Invitation has expired")
        if data.name is not None:
            validate_name(data.name)
        validate_optional_text(data.image, "Image URL", 255)

        async with self.transaction():
            user = await self.users.get_by_email(invitation.invitee_email)
            if user is None:
                user = await self.users.create(
                    User(
                        id=identity.user_id or new_id(),
                        email=invitation.invitee_email,
                        name=data.name or identity.name,
                        image=data.image,
                        email_verified=now,
                    )
                )
                for source, target in ((invitation.inviter_id, user.id), (user.id, invitation.inviter_id)):
                    await self.connections.create(
                        Connection(
                            user_id=source,
                            connected_user_id=target,
                            relationship=DEFAULT_RELATIONSHIP,
                            status=ConnectionStatus.ACCEPTED.value,
                        )
                    )
            elif await self.connections.get_between(invitation.inviter_id, user.id) is None:
                await self.connections.create(
                    Connection(
                        user_id=invitation.inviter_id,
                        connected_user_id=user.id,
                        relationship=DEFAULT_RELATIONSHIP,
                        status=ConnectionStatus.PENDING.value,
                    )
                )
            invitation.status = InvitationStatus.ACCEPTED.value
            invitation.accepted_at = now
            await self.invitations.update(invitation)

        log_domain_event("invitation.accepted", invitation_id=invitation.id, user_id=user.id)
        return user

    async def cancel_invitation(self, invitation_id: str, identity: Identity) -> InvitationRead:
        invitation = await self._get_own(invitation_id, identity, "cancel")
        async with self.transaction():
            invitation.status = InvitationStatus.CANCELLED.value
            await self.invitations.update(invitation)
        log_domain_event("invitation.cancelled", invitation_id=invitation.id)
        return (await self._to_reads([invitation]))[0]

    async def delete_invitation(self, invitation_id: str, identity: Identity) -> None:
        invitation = await self._get_own(invitation_id, identity, "delete")
        if invitation.status not in (InvitationStatus.PENDING.value, InvitationStatus.CANCELLED.value):
            raise ValidationError("Only pending or cancelled invitations can be deleted")
        async with self.transaction():
            await self.invitations.delete(invitation_id)
        log_domain_event("invitation.deleted", invitation_id=invitation_id)

    def send_invitation_email(self, email: str, invitation_url: str) -> str:
        validate_email(email)
        if not invitation_url:
            raise ValidationError("Invitation URL is required")
        validate_url(invitation_url, "Invitation URL")
        self.mail.send(email, "You're invited to Stay With Friends", invitation_email_body(invitation_url))
        return invitation_url
