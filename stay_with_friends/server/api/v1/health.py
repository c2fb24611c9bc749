"""
Liveness and version endpoints.

Load balancers and the frontend's status banner poll these routes, so they
live outside the ``/api`` prefix.
"""

from fastapi import APIRouter, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.server.core import constant
from stay_with_friends.server.services.deps import EngineDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Report whether the server is up and the database answers queries.",
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "Database unreachable"}},
)
async def health_check(engine: EngineDep, response: Response):
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check could not reach the database: {e}")
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "degraded", "database": "unavailable"}
    return {"status": "ok", "database": "ok"}


@router.get("/version", summary="Get Version")
async def version():
    """Semantic version of the running API."""
    return {"version": constant.VERSION}
