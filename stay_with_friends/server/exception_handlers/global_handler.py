"""
Catch-all 500 handler and handler registration.

Anything that is not a ``StayWithFriendsError`` ends up here. The full
traceback goes to the log under an error id, and only that id and the
exception type reach the client.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stay_with_friends.core.errors import StayWithFriendsError
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.monitoring import log_error

from .domain_handler import domain_exception_handler

logger = get_logger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Domain errors map to their own status, everything else to 500."""
    app.add_exception_handler(StayWithFriendsError, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
