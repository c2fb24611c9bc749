"""
Unit tests for the request logging middleware.

This test suite covers:
- Request metrics reporting
- The X-Process-Time header
- Slow request warnings
- Error propagation
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.responses import Response

from stay_with_friends.server.middleware import RequestLoggingMiddleware

MODULE = "stay_with_friends.server.middleware.request_logging"


def make_request(method="GET", path="/api/hosts"):
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.state = MagicMock()
    return request


class TestRequestLoggingMiddlewareDispatch:
    """Test RequestLoggingMiddleware.dispatch."""

    @pytest.mark.asyncio
    async def test_reports_successful_request(self):
        async def call_next(request):
            return Response(content="ok", status_code=201)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log:
            response = await middleware.dispatch(make_request("POST", "/api/users"), call_next)

        assert response.status_code == 201
        assert float(response.headers["X-Process-Time"]) >= 0
        kwargs = mock_log.call_args[1]
        assert (kwargs["method"], kwargs["path"], kwargs["status_code"]) == ("POST", "/api/users", 201)

    @pytest.mark.asyncio
    async def test_warns_about_slow_requests(self):
        async def call_next(request):
            return Response(status_code=200)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request"), patch(f"{MODULE}.logger") as mock_logger, patch(
            f"{MODULE}.time"
        ) as mock_time:
            mock_time.time.side_effect = [0.0, 2.0]
            await middleware.dispatch(make_request(), call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]

    @pytest.mark.asyncio
    async def test_reraises_and_reports_500(self):
        async def call_next(request):
            raise RuntimeError("database down")

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log, patch(f"{MODULE}.logger") as mock_logger:
            with pytest.raises(RuntimeError, match="database down"):
                await middleware.dispatch(make_request(), call_next)

        assert mock_log.call_args[1]["status_code"] == 500
        mock_logger.error.assert_called_once()


@pytest.mark.asyncio
async def test_header_added_in_application():
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/ping")

    assert response.status_code == 200
    assert "x-process-time" in response.headers
