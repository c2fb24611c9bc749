"""
Users repository.

Data access for user accounts, keyed by id or by email address.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from .base import SqlRepository


class UserRepository(SqlRepository[User]):
    """Repository for user data access operations using SQLModel."""

    default_order_by = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address.

        Args:
            email: Email address, matched exactly

        Returns:
            User instance or None
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalars().first()

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def get_many(self, user_ids: Iterable[str]) -> List[User]:
        ids = list(set(user_ids))
        if not ids:
            return []
        result = await self.session.execute(select(User).where(User.id.in_(ids)))  # type: ignore[attr-defined]
        return list(result.scalars().all())
