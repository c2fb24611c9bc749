"""
Shared service plumbing.

Services hold the business rules. Each one works on a single request-scoped
``AsyncSession`` and commits through :meth:`BaseService.transaction`, which
rolls back on failure and turns unique-constraint violations into
:class:`~stay_with_friends.core.errors.ConflictError`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.errors import ConflictError, PermissionDeniedError
from stay_with_friends.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """The signed-in user as forwarded by the frontend's auth layer."""

    user_id: str
    email: Optional[str] = None
    name: Optional[str] = None

    def require_self(self, user_id: Optional[str], message: str) -> None:
        """Raise unless ``user_id`` is the caller (``None`` means the caller)."""
        if user_id is not None and user_id != self.user_id:
            raise PermissionDeniedError(message)


class BaseService:
    """Base class for services bound to one database session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Commit the work done inside the block, or roll it back.

        Raises:
            ConflictError: If the database rejects a duplicate row
        """
        try:
            yield
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning(f"Integrity error rolled back: {exc.orig}")
            raise ConflictError("A record with these values already exists") from exc
        except Exception:
            await self.session.rollback()
            raise
