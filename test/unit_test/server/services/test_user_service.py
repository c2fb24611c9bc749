"""Unit tests for the user service."""

import pytest

from stay_with_friends.core.errors import ConflictError, NotFoundError, PermissionDeniedError, ValidationError
from stay_with_friends.core.models.io.users import UserCreate, UserUpdate
from stay_with_friends.server.services.base import Identity
from stay_with_friends.server.services.users import UserService

pytestmark = pytest.mark.asyncio


async def test_create_user(session):
    user = await UserService(session).create_user(UserCreate(email="carol@example.com", name="Carol"))

    assert user.id
    assert user.email == "carol@example.com"
    assert user.created_at is not None


async def test_create_user_rejects_duplicate_email(session, alice):
    with pytest.raises(ConflictError, match="already exists"):
        await UserService(session).create_user(UserCreate(email=alice.email))


@pytest.mark.parametrize(
    "email,name",
    [("bad", None), ("no-at-sign.example.com", None), ("ok@example.com", "")],
)
async def test_create_user_validation(session, email, name):
    with pytest.raises(ValidationError):
        await UserService(session).create_user(UserCreate(email=email, name=name))


async def test_get_user_missing(session):
    with pytest.raises(NotFoundError, match="User not found"):
        await UserService(session).get_user("missing")


async def test_update_user_by_owner(session, alice, identity_of):
    user = await UserService(session).update_user(alice.id, UserUpdate(name="Alice B"), identity_of(alice))

    assert user.name == "Alice B"


async def test_update_user_matching_email_owns_row(session, alice):
    # Rows created before the first sign-in carry another id but the same email
    identity = Identity(user_id="auth-provider-id", email=alice.email)

    user = await UserService(session).update_user(alice.id, UserUpdate(image="https://example.com/a.png"), identity)

    assert user.image == "https://example.com/a.png"


async def test_update_user_rejects_other_users(session, alice, bob, identity_of):
    with pytest.raises(PermissionDeniedError):
        await UserService(session).update_user(alice.id, UserUpdate(name="Mallory"), identity_of(bob))


async def test_update_user_requires_a_field(session, alice, identity_of):
    with pytest.raises(ValidationError, match="At least one of name or image"):
        await UserService(session).update_user(alice.id, UserUpdate(), identity_of(alice))


async def test_check_email_exists(session, alice):
    service = UserService(session)

    assert await service.check_email_exists(alice.email)
    assert not await service.check_email_exists("nobody@example.com")
