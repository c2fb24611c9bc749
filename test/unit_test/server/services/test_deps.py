"""Unit tests for server services dependencies.

Tests verify the identity headers and that each Annotated alias resolves to
the right provider through FastAPI's Depends mechanism.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from stay_with_friends.core.errors import AuthenticationRequiredError
from stay_with_friends.server.exception_handlers import setup_exception_handlers
from stay_with_friends.server.services import deps
from stay_with_friends.server.services.base import Identity


class TestIdentity:
    def test_get_identity_without_user_id(self):
        assert deps.get_identity(x_user_id=None, x_user_email="a@example.com") is None

    def test_get_identity_from_headers(self):
        identity = deps.get_identity(x_user_id="u1", x_user_email="a@example.com", x_user_name="Ann")

        assert identity == Identity(user_id="u1", email="a@example.com", name="Ann")

    def test_require_identity(self):
        identity = Identity(user_id="u1")

        assert deps.require_identity(identity) is identity
        with pytest.raises(AuthenticationRequiredError):
            deps.require_identity(None)


@pytest.mark.parametrize(
    "alias,provider",
    [
        (deps.IdentityDep, deps.require_identity),
        (deps.EngineDep, deps.get_engine),
        (deps.UserServiceDep, deps.get_user_service),
        (deps.HostServiceDep, deps.get_host_service),
        (deps.AvailabilityServiceDep, deps.get_availability_service),
        (deps.BookingServiceDep, deps.get_booking_service),
        (deps.ConnectionServiceDep, deps.get_connection_service),
        (deps.InvitationServiceDep, deps.get_invitation_service),
        (deps.StatsServiceDep, deps.get_stats_service),
        (deps.UploadServiceDep, deps.get_upload_service),
    ],
)
def test_annotated_aliases_use_provider(alias, provider):
    assert alias.__metadata__[0].dependency is provider


@pytest.mark.asyncio
async def test_identity_dep_in_endpoint():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/me")
    async def me(identity: deps.IdentityDep):
        return {"user_id": identity.user_id, "email": identity.email}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        anonymous = await client.get("/me")
        signed_in = await client.get("/me", headers={"X-User-Id": "u1", "X-User-Email": "a@example.com"})

    assert anonymous.status_code == 401
    assert signed_in.json() == {"user_id": "u1", "email": "a@example.com"}
