"""Unit tests for the repositories against an in-memory SQLite database."""

from datetime import date, datetime, timedelta, timezone

import pytest

from stay_with_friends.core.database.entities import (
    Availability,
    BookingRequest,
    Connection,
    Host,
    Invitation,
)
from stay_with_friends.core.database.repositories import (
    AvailabilityRepository,
    BookingRequestRepository,
    ConnectionRepository,
    HostRepository,
    InvitationRepository,
    StatsRepository,
    UserRepository,
)

pytestmark = pytest.mark.asyncio


async def add_host(session, owner, name, **fields) -> Host:
    host = Host(name=name, user_id=owner.id, **fields)
    session.add(host)
    await session.flush()
    return host


async def add_window(session, host, start, end, status="available") -> Availability:
    window = Availability(host_id=host.id, start_date=start, end_date=end, status=status)
    session.add(window)
    await session.flush()
    return window


class TestTimestamps:
    async def test_stored_timestamp_reads_back_as_aware_utc(self, session, alice):
        created = alice.created_at
        session.expunge_all()

        loaded = await UserRepository(session).get_by_id(alice.id)

        assert loaded.created_at.tzinfo is timezone.utc
        assert loaded.created_at == created

    async def test_offsets_are_normalised_to_utc(self, session, alice):
        plus_two = timezone(timedelta(hours=2))
        session.add(
            Invitation(
                inviter_id=alice.id,
                invitee_email="x@example.com",
                token="d" * 64,
                expires_at=datetime(2030, 1, 1, 12, 0, tzinfo=plus_two),
            )
        )
        await session.commit()
        session.expunge_all()

        loaded = await InvitationRepository(session).get_by_token("d" * 64)

        assert loaded.expires_at == datetime(2030, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert not loaded.is_expired(datetime(2030, 1, 1, 9, 59, tzinfo=timezone.utc))


class TestUserRepository:
    async def test_get_by_email_and_exists(self, session, alice):
        repo = UserRepository(session)

        assert (await repo.get_by_email("alice@example.com")).id == alice.id
        assert await repo.email_exists("alice@example.com")
        assert not await repo.email_exists("nobody@example.com")

    async def test_get_many_ignores_unknown(self, session, alice, bob):
        users = await UserRepository(session).get_many([alice.id, bob.id, "missing"])

        assert {u.id for u in users} == {alice.id, bob.id}

    async def test_get_many_empty(self, session):
        assert await UserRepository(session).get_many([]) == []


class TestHostRepository:
    async def test_search_matches_text_case_insensitively(self, session, alice):
        await add_host(session, alice, "Lake House", city="Portland")
        await add_host(session, alice, "City Loft", description="Close to the LAKE")
        await add_host(session, alice, "Mountain Cabin", state="Colorado")

        found = await HostRepository(session).search("lake")

        assert [h.name for h in found] == ["City Loft", "Lake House"]

    @pytest.mark.parametrize("query", ["%", "_", "100%"])
    async def test_search_treats_wildcards_literally(self, session, alice, query):
        await add_host(session, alice, "Lake House")
        await add_host(session, alice, "Discount", description="100% off")

        found = await HostRepository(session).search(query)

        assert [h.name for h in found] == (["Discount"] if "%" in query else [])

    async def test_list_referencing_photo(self, session, alice, bob):
        await add_host(session, alice, "Loft", photos='["/uploads/image-1.png"]')
        await add_host(session, bob, "Barn", photos='["/uploads/image-2.png"]')

        found = await HostRepository(session).list_referencing_photo("image-1.png")

        assert [h.name for h in found] == ["Loft"]

    async def test_search_by_start_date_uses_available_windows(self, session, alice):
        open_host = await add_host(session, alice, "Open")
        booked_host = await add_host(session, alice, "Booked")
        await add_window(session, open_host, date(2025, 6, 1), date(2025, 6, 10))
        await add_window(session, open_host, date(2025, 6, 5), date(2025, 6, 7))
        await add_window(session, booked_host, date(2025, 6, 1), date(2025, 6, 10), status="booked")

        found = await HostRepository(session).search(None, date(2025, 6, 5))

        assert [h.name for h in found] == ["Open"]

    async def test_search_start_date_bounds_inclusive(self, session, alice):
        host = await add_host(session, alice, "Edge")
        await add_window(session, host, date(2025, 6, 1), date(2025, 6, 10))
        repo = HostRepository(session)

        assert len(await repo.search(None, date(2025, 6, 10))) == 1
        assert await repo.search(None, date(2025, 6, 11)) == []

    async def test_delete_cascade(self, session, alice, bob):
        host = await add_host(session, alice, "Gone")
        await add_window(session, host, date(2025, 1, 1), date(2025, 1, 2))
        session.add(
            BookingRequest(
                host_id=host.id, requester_id=bob.id, start_date=date(2025, 1, 1), end_date=date(2025, 1, 2), guests=1
            )
        )
        await session.flush()

        assert await HostRepository(session).delete_cascade(host.id)

        assert await AvailabilityRepository(session).list_by_host(host.id) == []
        assert await BookingRequestRepository(session).list_by_host(host.id) == []
        assert not await HostRepository(session).delete_cascade(host.id)


class TestAvailabilityRepository:
    async def test_list_by_hosts_has_entry_for_each_host(self, session, alice):
        first = await add_host(session, alice, "First")
        second = await add_host(session, alice, "Second")
        await add_window(session, first, date(2025, 2, 1), date(2025, 2, 3))

        grouped = await AvailabilityRepository(session).list_by_hosts([first.id, second.id])

        assert len(grouped[first.id]) == 1
        assert grouped[second.id] == []

    async def test_covering_and_overlapping(self, session, alice):
        host = await add_host(session, alice, "Host")
        await add_window(session, host, date(2025, 3, 1), date(2025, 3, 5))
        await add_window(session, host, date(2025, 3, 10), date(2025, 3, 12), status="unavailable")
        repo = AvailabilityRepository(session)

        assert len(await repo.list_covering(date(2025, 3, 5))) == 1
        assert await repo.list_covering(date(2025, 3, 11)) == []
        assert len(await repo.list_overlapping(date(2025, 3, 4), date(2025, 3, 11))) == 1
        assert len(await repo.list_overlapping(date(2025, 3, 4), date(2025, 3, 11), only_available=False)) == 2

    async def test_available_dates_distinct(self, session, alice, bob):
        first = await add_host(session, alice, "First")
        second = await add_host(session, bob, "Second")
        await add_window(session, first, date(2025, 4, 1), date(2025, 4, 3))
        await add_window(session, second, date(2025, 4, 2), date(2025, 4, 4))

        days = await AvailabilityRepository(session).available_dates(date(2025, 4, 1), date(2025, 4, 30))

        assert days == [date(2025, 4, 1), date(2025, 4, 2), date(2025, 4, 3), date(2025, 4, 4)]


class TestBookingRequestRepository:
    async def test_host_owner_queries(self, session, alice, bob):
        mine = await add_host(session, alice, "Mine")
        theirs = await add_host(session, bob, "Theirs")
        now = datetime(2025, 1, 1)
        for offset, (host, status) in enumerate([(mine, "pending"), (mine, "approved"), (theirs, "pending")]):
            session.add(
                BookingRequest(
                    host_id=host.id,
                    requester_id=bob.id,
                    start_date=date(2025, 5, 1),
                    end_date=date(2025, 5, 2),
                    guests=1,
                    status=status,
                    created_at=now + timedelta(minutes=offset),
                )
            )
        await session.flush()
        repo = BookingRequestRepository(session)

        listed = await repo.list_for_host_owner(alice.id)

        assert [b.status for b in listed] == ["approved", "pending"]
        assert await repo.count_pending_for_host_owner(alice.id) == 1
        assert await repo.count_pending_for_host_owner(bob.id) == 1


class TestConnectionRepository:
    async def test_between_checks_both_directions(self, session, alice, bob):
        session.add(Connection(user_id=alice.id, connected_user_id=bob.id, status="pending"))
        await session.flush()
        repo = ConnectionRepository(session)

        assert await repo.get_between(bob.id, alice.id) is not None
        assert await repo.get_directed(bob.id, alice.id) is None
        assert [c.user_id for c in await repo.list_incoming_pending(bob.id)] == [alice.id]

    async def test_accepted_and_delete_between(self, session, alice, bob):
        session.add(Connection(user_id=alice.id, connected_user_id=bob.id, status="accepted"))
        session.add(Connection(user_id=bob.id, connected_user_id=alice.id, status="accepted"))
        await session.flush()
        repo = ConnectionRepository(session)

        assert len(await repo.list_accepted_for_user(alice.id)) == 2
        assert await StatsRepository(session).total_connections() == 2
        assert await repo.delete_between(alice.id, bob.id) == 2
        assert await repo.list_accepted_for_user(alice.id) == []


class TestInvitationRepository:
    async def test_find_open_ignores_expired_and_used(self, session, alice):
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        session.add(
            Invitation(inviter_id=alice.id, invitee_email="x@example.com", token="a" * 64, expires_at=now - timedelta(days=1))
        )
        session.add(
            Invitation(
                inviter_id=alice.id,
                invitee_email="x@example.com",
                token="b" * 64,
                status="cancelled",
                expires_at=now + timedelta(days=1),
            )
        )
        await session.flush()
        repo = InvitationRepository(session)

        assert await repo.find_open(alice.id, "x@example.com", now) is None

        session.add(
            Invitation(inviter_id=alice.id, invitee_email="x@example.com", token="c" * 64, expires_at=now + timedelta(days=1))
        )
        await session.flush()

        assert (await repo.find_open(alice.id, "x@example.com", now)).token == "c" * 64
        assert (await repo.get_by_token("b" * 64)).status == "cancelled"


class TestStatsRepository:
    async def test_counts(self, session, alice, bob):
        host = await add_host(session, alice, "Host")
        session.add(
            BookingRequest(
                host_id=host.id,
                requester_id=bob.id,
                start_date=date(2025, 1, 1),
                end_date=date(2025, 1, 2),
                guests=1,
                status="approved",
            )
        )
        session.add(
            BookingRequest(
                host_id=host.id, requester_id=bob.id, start_date=date(2025, 1, 1), end_date=date(2025, 1, 2), guests=1
            )
        )
        await session.flush()
        stats = StatsRepository(session)

        assert await stats.total_hosts() == 1
        assert await stats.total_bookings() == 1
        assert await stats.total_connections() == 0


class TestSqlRepository:
    async def test_list_filters_orders_and_paginates(self, session, alice, bob):
        for name, owner in (("Cabin", alice), ("Attic", bob), ("Barn", alice)):
            await add_host(session, owner, name)
        repo = HostRepository(session)

        assert [h.name for h in await repo.list()] == ["Attic", "Barn", "Cabin"]
        assert [h.name for h in await repo.list(filters={"user_id": alice.id, "unknown": "x"})] == ["Barn", "Cabin"]
        assert [h.name for h in await repo.list(limit=1, offset=1)] == ["Barn"]
        assert await repo.count() == 3
        assert await repo.count({"user_id": bob.id}) == 1

    async def test_update_and_delete(self, session, alice):
        host = await add_host(session, alice, "Loft")
        repo = HostRepository(session)

        host.city = "Lisbon"
        await repo.update(host)
        assert (await repo.get_by_id(host.id)).city == "Lisbon"

        assert await repo.delete(host.id)
        assert await repo.get_by_id(host.id) is None
        assert not await repo.delete(host.id)
