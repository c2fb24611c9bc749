"""
Domain Exception Handler.

Maps :class:`~stay_with_friends.core.errors.StayWithFriendsError` subclasses
onto HTTP responses with the status code each class declares.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from stay_with_friends.core.errors import StayWithFriendsError
from stay_with_friends.core.logging_config import get_logger

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: StayWithFriendsError) -> JSONResponse:
    """
    Turn a domain error into a ``{"detail": message}`` response.

    Args:
        request: The HTTP request that caused the exception
        exc: The domain error that was raised

    Returns:
        JSONResponse with the error's status code and message
    """
    logger.info(
        f"{request.method} {request.url.path} rejected with {exc.status_code}: {exc.message}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
