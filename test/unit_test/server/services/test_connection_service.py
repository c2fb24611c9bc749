"""Unit tests for the connection service."""

import pytest

from stay_with_friends.core.database.entities import Connection, User
from stay_with_friends.core.errors import ConflictError, NotFoundError, PermissionDeniedError, ValidationError
from stay_with_friends.core.models.io.connections import ConnectionCreate
from stay_with_friends.server.services.connections import ConnectionService

pytestmark = pytest.mark.asyncio


async def test_request_and_accept(session, alice, bob, identity_of):
    service = ConnectionService(session)

    sent = await service.create_connection(
        ConnectionCreate(connected_user_email=bob.email, relationship="colleague"), identity_of(alice)
    )
    assert sent.status == "pending"
    assert sent.connected_user.email == bob.email

    requests = await service.list_requests(bob.id, identity_of(bob))
    assert [r.requester_user.id for r in requests] == [alice.id]

    accepted = await service.update_status(sent.id, "accepted", identity_of(bob))
    assert accepted.status == "accepted"

    assert [c.connected_user.id for c in await service.list_connections(alice.id, identity_of(alice))] == [bob.id]
    assert [c.connected_user.id for c in await service.list_connections(bob.id, identity_of(bob))] == [alice.id]
    assert await service.list_requests(bob.id, identity_of(bob)) == []


async def test_mutual_rows_listed_once(session, alice, bob, identity_of):
    mine = Connection(user_id=alice.id, connected_user_id=bob.id, status="accepted")
    theirs = Connection(user_id=bob.id, connected_user_id=alice.id, status="accepted")
    session.add_all([mine, theirs])
    await session.commit()

    listed = await ConnectionService(session).list_connections(alice.id, identity_of(alice))

    assert [c.id for c in listed] == [mine.id]


async def test_create_connection_rules(session, alice, bob, identity_of):
    service = ConnectionService(session)

    with pytest.raises(NotFoundError, match="User with this email not found"):
        await service.create_connection(ConnectionCreate(connected_user_email="who@example.com"), identity_of(alice))
    with pytest.raises(ValidationError, match="You cannot connect with yourself"):
        await service.create_connection(ConnectionCreate(connected_user_email=alice.email), identity_of(alice))
    with pytest.raises(PermissionDeniedError):
        await service.create_connection(
            ConnectionCreate(user_id=bob.id, connected_user_email=alice.email), identity_of(alice)
        )
    with pytest.raises(ValidationError, match="Relationship must be no more than 50 characters"):
        await service.create_connection(
            ConnectionCreate(connected_user_email=bob.email, relationship="x" * 51), identity_of(alice)
        )

    await service.create_connection(ConnectionCreate(connected_user_email=bob.email), identity_of(alice))
    with pytest.raises(ConflictError):
        await service.create_connection(ConnectionCreate(connected_user_email=alice.email), identity_of(bob))


async def test_only_parties_may_change_a_connection(session, alice, bob, identity_of):
    service = ConnectionService(session)
    carol = await service.users.create(User(email="carol@example.com", name="Carol"))
    await session.commit()
    sent = await service.create_connection(ConnectionCreate(connected_user_email=bob.email), identity_of(alice))

    with pytest.raises(PermissionDeniedError, match="update connections you are part of"):
        await service.update_status(sent.id, "accepted", identity_of(carol))
    with pytest.raises(ValidationError, match="Status must be one of"):
        await service.update_status(sent.id, "friends", identity_of(bob))


async def test_delete_requires_accepted(session, alice, bob, identity_of):
    service = ConnectionService(session)
    sent = await service.create_connection(ConnectionCreate(connected_user_email=bob.email), identity_of(alice))

    with pytest.raises(ValidationError, match="Only accepted connections"):
        await service.delete_connection(sent.id, identity_of(alice))

    await service.update_status(sent.id, "accepted", identity_of(bob))
    session.add(Connection(user_id=bob.id, connected_user_id=alice.id, status="accepted"))
    await session.commit()

    await service.delete_connection(sent.id, identity_of(bob))

    assert await service.list_connections(alice.id, identity_of(alice)) == []
    assert await service.list_connections(bob.id, identity_of(bob)) == []


async def test_list_connections_is_private(session, alice, bob, identity_of):
    with pytest.raises(PermissionDeniedError):
        await ConnectionService(session).list_connections(alice.id, identity_of(bob))
