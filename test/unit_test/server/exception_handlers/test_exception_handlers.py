"""
Unit tests for server exception handlers.

Tests cover the mapping of domain errors onto status codes and the global
fallback for unexpected exceptions.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from stay_with_friends.core.errors import (
    AuthenticationRequiredError,
    ConflictError,
    NotFoundError,
    PayloadTooLargeError,
    PermissionDeniedError,
    StayWithFriendsError,
    ValidationError,
)
from stay_with_friends.server.exception_handlers import (
    domain_exception_handler,
    global_exception_handler,
    setup_exception_handlers,
)


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/hosts"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestDomainExceptionHandler:
    """Test suite for the domain error handler."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc,status_code",
        [
            (ValidationError("Name is required"), 400),
            (AuthenticationRequiredError(), 401),
            (PermissionDeniedError("Unauthorized: Can only update your own hosts"), 403),
            (NotFoundError("Host"), 404),
            (ConflictError("User with this email already exists"), 409),
            (PayloadTooLargeError("File too large"), 413),
        ],
    )
    async def test_status_code_and_detail(self, mock_request, exc, status_code):
        response = await domain_exception_handler(mock_request, exc)

        assert response.status_code == status_code
        assert json.loads(response.body.decode()) == {"detail": exc.message}


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        """Test that exception handler logs errors."""
        exc = ValueError("Test error")

        with patch("stay_with_friends.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["client"] == "127.0.0.1"

    @pytest.mark.asyncio
    async def test_exception_handler_returns_500_json(self, mock_request):
        """Test that exception handler returns a 500 JSON response with an error ID."""
        exc = RuntimeError("Test error")

        with patch("stay_with_friends.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 500
        body = json.loads(response.body.decode())
        assert body["detail"] == "Internal server error"
        assert body["error_id"] == id(exc)
        assert body["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_exception_handler_without_client(self, mock_request):
        """Test that a request without client info is still handled."""
        mock_request.client = None

        with patch("stay_with_friends.server.exception_handlers.global_handler.logger") as mock_logger:
            response = await global_exception_handler(mock_request, KeyError("missing"))

        assert response.status_code == 500
        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestSetupExceptionHandlers:
    """Test registering the handlers on an application."""

    def test_registers_handlers(self):
        app = FastAPI()

        setup_exception_handlers(app)

        assert app.exception_handlers[StayWithFriendsError] is domain_exception_handler
        assert app.exception_handlers[Exception] is global_exception_handler

    @pytest.mark.asyncio
    async def test_end_to_end_responses(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/missing")
        async def missing():
            raise NotFoundError("Host")

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            missing_response = await client.get("/missing")
            boom_response = await client.get("/boom")

        assert missing_response.status_code == 404
        assert missing_response.json() == {"detail": "Host not found"}
        assert boom_response.status_code == 500
        assert boom_response.json()["detail"] == "Internal server error"
