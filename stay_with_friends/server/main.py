"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request logging), registers exception handlers, includes all API routers and
serves uploaded images. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from stay_with_friends.core.database import init_db
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.monitoring import initialize_logfire

from .api.v1 import (
    availabilities,
    booking_requests,
    connections,
    health,
    hosts,
    invitations,
    reset,
    stats,
    uploads,
    users,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestLoggingMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup.
    """
    logger.info("Starting up Stay With Friends API...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Stay With Friends API...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Stay With Friends API

    Backend for a lodging marketplace restricted to a trusted network. It manages users,
    host listings and their availability, booking requests, connections and invitations.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{constant.API_PREFIX}/users")
app.include_router(hosts.router, prefix=f"{constant.API_PREFIX}/hosts")
app.include_router(availabilities.router, prefix=f"{constant.API_PREFIX}/availabilities")
app.include_router(booking_requests.router, prefix=f"{constant.API_PREFIX}/booking-requests")
app.include_router(connections.router, prefix=constant.API_PREFIX)
app.include_router(invitations.router, prefix=f"{constant.API_PREFIX}/invitations")
app.include_router(stats.router, prefix=f"{constant.API_PREFIX}/stats")
app.include_router(uploads.router, prefix=constant.API_PREFIX)
app.include_router(reset.router, prefix=constant.API_PREFIX)

uploads_dir = Path(settings.uploads.dir)
uploads_dir.mkdir(parents=True, exist_ok=True)
app.mount(constant.UPLOADS_ROUTE, StaticFiles(directory=uploads_dir), name="uploads")
