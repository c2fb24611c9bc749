from typing import AsyncGenerator, Callable, Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database import get_session
from stay_with_friends.core.database.entities import User
from stay_with_friends.server.main import app
from stay_with_friends.server.services.deps import get_engine, get_upload_service
from stay_with_friends.server.services.uploads import UploadService

AuthHeaders = Callable[..., Dict[str, str]]


@pytest.fixture
def uploads_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest_asyncio.fixture(name="client")
async def client_fixture(test_engine, session: AsyncSession, uploads_dir) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the test database."""

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_engine] = lambda: test_engine
    app.dependency_overrides[get_upload_service] = lambda: UploadService(uploads_dir=uploads_dir, max_bytes=1024)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth() -> AuthHeaders:
    """Build the identity headers the frontend forwards for a signed-in user."""

    def _headers(user: User, email: Optional[str] = None) -> Dict[str, str]:
        headers = {"X-User-Id": user.id, "X-User-Email": email or user.email}
        if user.name:
            headers["X-User-Name"] = user.name
        return headers

    return _headers
