"""
Development database reset.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from stay_with_friends.core.database import create_all, drop_all
from stay_with_friends.core.logging_config import get_logger

from .uploads import UploadService

logger = get_logger(__name__)


async def reset_everything(engine: AsyncEngine, uploads: Optional[UploadService] = None) -> int:
    """Drop and recreate all tables, then remove uploaded images.

    Returns:
        Number of uploaded files removed
    """
    logger.warning("Resetting database and uploads")
    await drop_all(engine)
    await create_all(engine)
    return (uploads or UploadService()).clear()
