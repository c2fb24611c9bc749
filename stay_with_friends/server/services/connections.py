"""
Connection service.

Maintains the trusted network between users.
"""

from __future__ import annotations

from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database.entities.connections import Connection
from stay_with_friends.core.database.repositories import ConnectionRepository, UserRepository
from stay_with_friends.core.errors import ConflictError, NotFoundError, PermissionDeniedError, ValidationError
from stay_with_friends.core.models.domain.enums import ConnectionStatus
from stay_with_friends.core.models.io.connections import ConnectionCreate, ConnectionRead
from stay_with_friends.core.models.io.users import UserSummary
from stay_with_friends.core.monitoring import log_domain_event
from stay_with_friends.core.validation import validate_email, validate_optional_text, validate_status

from .base import BaseService, Identity


class ConnectionService(BaseService):
    """Business rules for connections."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.users = UserRepository(session)
        self.connections = ConnectionRepository(session)

    async def _summaries(self, user_ids) -> Dict[str, UserSummary]:
        return {user.id: UserSummary.model_validate(user) for user in await self.users.get_many(user_ids)}

    async def _get_connection(self, connection_id: str, identity: Identity, action: str) -> Connection:
        connection = await self.connections.get_by_id(connection_id)
        if connection is None:
            raise NotFoundError("Connection")
        if not connection.involves(identity.user_id):
            raise PermissionDeniedError(f"Unauthorized: Can only {action} connections you are part of")
        return connection

    async def list_connections(self, user_id: str, identity: Identity) -> List[ConnectionRead]:
        """Accepted connections of the caller, one entry per connected person.

        Args:
            user_id: Must be the caller
            identity: Signed-in user

        Returns:
            Connections with ``connected_user`` set to the other party
        """
        identity.require_self(user_id, "Unauthorized: Can only view your own connections")
        rows = await self.connections.list_accepted_for_user(user_id)

        # Mutual friendships are stored twice; keep the caller's own row when present
        by_other: Dict[str, Connection] = {}
        for row in rows:
            other = row.other_party(user_id)
            if other not in by_other or row.user_id == user_id:
                by_other[other] = row

        users = await self._summaries(by_other)
        return [
            ConnectionRead.model_validate(row).model_copy(update={"connected_user": users.get(other)})
            for other, row in by_other.items()
        ]

    async def list_requests(self, user_id: str, identity: Identity) -> List[ConnectionRead]:
        """Pending requests addressed to the caller, with the requester attached."""
        identity.require_self(user_id, "Unauthorized: Can only view your own connection requests")
        rows = await self.connections.list_incoming_pending(user_id)
        users = await self._summaries(row.user_id for row in rows)
        return [
            ConnectionRead.model_validate(row).model_copy(update={"requester_user": users.get(row.user_id)})
            for row in rows
        ]

    async def create_connection(self, data: ConnectionCreate, identity: Identity) -> ConnectionRead:
        """Send a connection request to the user registered under an email.

        Raises:
            PermissionDeniedError: If ``user_id`` names someone else
            NotFoundError: If nobody uses that email
            ValidationError: If the caller targets themselves
            ConflictError: If a connection already exists in either direction
        """
        identity.require_self(data.user_id, "Unauthorized: Can only create connections for yourself")
        validate_email(data.connected_user_email)
        validate_optional_text(data.relationship, "Relationship", 50)

        target = await self.users.get_by_email(data.connected_user_email)
        if target is None:
            raise NotFoundError("User with this email")
        if target.id == identity.user_id:
            raise ValidationError("You cannot connect with yourself")
        if await self.connections.get_between(identity.user_id, target.id) is not None:
            raise ConflictError("Users are already connected or have a pending connection")

        connection = Connection(
            user_id=identity.user_id,
            connected_user_id=target.id,
            relationship=data.relationship,
            status=ConnectionStatus.PENDING.value,
        )
        async with self.transaction():
            await self.connections.create(connection)
        log_domain_event("connection.requested", connection_id=connection.id, user_id=identity.user_id)
        return ConnectionRead.model_validate(connection).model_copy(
            update={"connected_user": UserSummary.model_validate(target)}
        )

    async def update_status(self, connection_id: str, status: str, identity: Identity) -> ConnectionRead:
        validate_status(status, ConnectionStatus.values())
        if not status:
            raise ValidationError("Status is required")
        connection = await self._get_connection(connection_id, identity, "update")
        async with self.transaction():
            connection.status = status
            await self.connections.update(connection)
        log_domain_event("connection.status_changed", connection_id=connection.id, status=status)
        return ConnectionRead.model_validate(connection)

    async def delete_connection(self, connection_id: str, identity: Identity) -> None:
        """Remove an accepted connection in both directions.

        Raises:
            ValidationError: If the connection is not accepted
        """
        connection = await self._get_connection(connection_id, identity, "delete")
        if connection.status != ConnectionStatus.ACCEPTED.value:
            raise ValidationError("Only accepted connections can be removed via this operation")
        async with self.transaction():
            removed = await self.connections.delete_between(connection.user_id, connection.connected_user_id)
        log_domain_event("connection.removed", connection_id=connection_id, rows=removed)
