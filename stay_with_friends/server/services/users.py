"""
User service.

Profile management for the people in the network. Sign-in itself happens in
the frontend; this service only stores what it forwards.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database.entities.users import User
from stay_with_friends.core.database.repositories import UserRepository
from stay_with_friends.core.errors import ConflictError, NotFoundError, PermissionDeniedError, ValidationError
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.models.io.users import UserCreate, UserUpdate
from stay_with_friends.core.monitoring import log_domain_event
from stay_with_friends.core.validation import validate_email, validate_name, validate_optional_text

from .base import BaseService, Identity

logger = get_logger(__name__)


class UserService(BaseService):
    """Create, read and update user profiles."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.users = UserRepository(session)

    async def create_user(self, data: UserCreate) -> User:
        """Create a user account.

        Args:
            data: Email plus optional name and avatar

        Returns:
            The new user

        Raises:
            ValidationError: If the email or name is malformed
            ConflictError: If the email is already registered
        """
        validate_email(data.email)
        if data.name is not None:
            validate_name(data.name)
        validate_optional_text(data.image, "Image URL", 2048)

        if await self.users.email_exists(data.email):
            raise ConflictError("User with this email already exists")

        async with self.transaction():
            user = await self.users.create(User(email=data.email, name=data.name, image=data.image))
        log_domain_event("user.created", user_id=user.id)
        return user

    async def get_user(self, user_id: str) -> User:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User")
        return user

    async def get_user_by_email(self, email: str) -> User:
        user = await self.users.get_by_email(email)
        if user is None:
            raise NotFoundError("User")
        return user

    async def update_user(self, user_id: str, data: UserUpdate, identity: Identity) -> User:
        """Update the caller's own name and/or avatar.

        The caller owns the row when the ids match, or when the row carries
        the caller's email (accounts created before the first sign-in).

        Raises:
            ValidationError: If neither field is given or the name is invalid
            PermissionDeniedError: If the row belongs to someone else
            NotFoundError: If the user does not exist
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError("At least one of name or image must be provided")

        user = await self.get_user(user_id)
        owns_row = user.id == identity.user_id or (identity.email is not None and user.email == identity.email)
        if not owns_row:
            raise PermissionDeniedError("Unauthorized: Can only update your own profile")

        if "name" in changes:
            validate_name(changes["name"])
        validate_optional_text(changes.get("image"), "Image URL", 2048)

        async with self.transaction():
            for key, value in changes.items():
                setattr(user, key, value)
            await self.users.update(user)
        logger.debug(f"Updated user {user.id}: {sorted(changes)}")
        return user

    async def check_email_exists(self, email: str) -> bool:
        validate_email(email)
        return await self.users.email_exists(email)
