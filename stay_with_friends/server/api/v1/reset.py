"""
Development Reset Endpoint.

Drops every table and stored upload. Only active when
``ENABLE_DEV_RESET`` is set; otherwise the route answers 404.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.server.core.config import settings
from stay_with_friends.server.services.deps import EngineDep, UploadServiceDep
from stay_with_friends.server.services.reset import reset_everything

logger = get_logger(__name__)

router = APIRouter(tags=["dev"])


@router.post(
    "/reset",
    summary="Reset Database",
    description="Drop and recreate all tables and delete uploaded images. Development only.",
    responses={
        200: {"description": "Database reset"},
        404: {"description": "Reset is disabled"},
    },
)
async def reset_database(engine: EngineDep, uploads: UploadServiceDep):
    if not settings.enable_dev_reset:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    removed = await reset_everything(engine, uploads)
    return {"success": True, "removed_uploads": removed}
