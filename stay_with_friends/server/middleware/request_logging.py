"""
Request Logging Middleware for FastAPI.

Records every request's method, path, status and duration, exposes the
duration in an ``X-Process-Time`` header and warns about slow requests.
When Logfire is enabled the same data is forwarded to it.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.monitoring import log_api_request

logger = get_logger(__name__)

SLOW_REQUEST_MS = 1000


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Times each request and reports it through ``log_api_request``."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.time()
        request.state.start_time = started
        method, path = request.method, request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.time() - started) * 1000
            # Unhandled errors still count as a 500 before propagating.
            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={"method": method, "path": path, "duration_ms": elapsed_ms, "error": str(e)},
            )
            log_api_request(method=method, path=path, status_code=500, duration_ms=elapsed_ms)
            raise

        elapsed_ms = (time.time() - started) * 1000
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=elapsed_ms)
        response.headers["X-Process-Time"] = str(elapsed_ms)

        if elapsed_ms > SLOW_REQUEST_MS:
            logger.warning(
                f"Slow API request: {method} {path} took {elapsed_ms:.2f}ms",
                extra={"method": method, "path": path, "duration_ms": elapsed_ms, "status_code": response.status_code},
            )
        return response
