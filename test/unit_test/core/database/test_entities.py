"""Unit tests for entity helpers."""

from datetime import datetime, timedelta

from stay_with_friends.core.database.entities import Connection, Host, Invitation, User
from stay_with_friends.core.database.entities.hosts import dump_string_list, parse_string_list


class TestStringLists:
    def test_parse_accepts_list_json_and_garbage(self):
        assert parse_string_list(["wifi", "parking"]) == ["wifi", "parking"]
        assert parse_string_list('["wifi"]') == ["wifi"]
        assert parse_string_list("not json") == []
        assert parse_string_list(None) == []

    def test_dump_round_trips_through_host(self):
        host = Host(name="Loft")
        host.set_amenities_list(["wifi", "kitchen"])
        host.set_photos_list('["/uploads/a.png"]')

        assert host.get_amenities_list() == ["wifi", "kitchen"]
        assert host.get_photos_list() == ["/uploads/a.png"]
        assert dump_string_list(None) is None


class TestEntityHelpers:
    def test_user_display_name_falls_back_to_email(self):
        assert User(email="a@example.com").display_name == "a@example.com"
        assert User(email="a@example.com", name="Ann").display_name == "Ann"

    def test_connection_other_party(self):
        connection = Connection(user_id="u1", connected_user_id="u2", status="pending")

        assert connection.involves("u2")
        assert not connection.involves("u3")
        assert connection.other_party("u1") == "u2"
        assert connection.other_party("u2") == "u1"

    def test_invitation_expiry(self):
        now = datetime(2025, 1, 1)
        invitation = Invitation(inviter_id="u1", invitee_email="x@example.com", token="t", expires_at=now)

        assert not invitation.is_expired(now)
        assert invitation.is_expired(now + timedelta(seconds=1))
