"""
Optional Logfire tracing.

The request middleware, the exception handlers and the services report through
the ``log_*`` helpers here. Logfire stays off unless ``LOGFIRE_ENABLED`` is
set and a token is available. Events always reach the standard logger and are
forwarded to Logfire once it has been configured.
"""

import logging
import os
from typing import Any, Optional

import logfire
from fastapi import FastAPI

logger = logging.getLogger(__name__)

LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "stay-with-friends-api")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.1.0")

LOGFIRE_TRACE_SQLALCHEMY = os.getenv("LOGFIRE_TRACE_SQLALCHEMY", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")

_logfire_configured = False


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """Configure Logfire and instrument SQLAlchemy and, when given, ``app``.

    Returns:
        True if Logfire was configured, False if monitoring stays disabled.
    """
    global _logfire_configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning("Logfire is enabled but LOGFIRE_TOKEN is not set. Monitoring will not work.")
        return False

    logfire.configure(
        token=LOGFIRE_TOKEN,
        service_name=LOGFIRE_SERVICE_NAME,
        service_version=LOGFIRE_SERVICE_VERSION,
        environment=LOGFIRE_ENVIRONMENT,
    )
    _logfire_configured = True

    if LOGFIRE_TRACE_SQLALCHEMY:
        logfire.instrument_sqlalchemy()
        logger.info("Logfire: SQLAlchemy instrumentation enabled")

    if LOGFIRE_TRACE_FASTAPI and app is not None:
        logfire.instrument_fastapi(app=app)
        logger.info("Logfire: FastAPI instrumentation enabled")

    logger.info(f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}")
    return True


def is_logfire_enabled() -> bool:
    return _logfire_configured


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    logger.debug(f"{method} {path} -> {status_code} ({duration_ms:.2f}ms)")
    if _logfire_configured:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )


def log_domain_event(event: str, **attributes: Any) -> None:
    """
    Record a business event such as a booking approval.

    Args:
        event: Short event name (e.g. ``booking.approved``)
        **attributes: Identifiers that describe the event
    """
    details = ", ".join(f"{key}={value}" for key, value in attributes.items())
    logger.info(f"{event}: {details}" if details else event)
    if _logfire_configured:
        logfire.info(event, **attributes)


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    # The caller has already written the traceback to the standard log.
    if _logfire_configured:
        logfire.error(f"{error_type}: {error_message}", **(context or {}))
