import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_empty_stats(client: AsyncClient):
    response = await client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {"total_hosts": 0, "total_connections": 0, "total_bookings": 0}


async def test_stats_count_hosts_connections_and_approved_bookings(client: AsyncClient, alice, bob, auth):
    host = (await client.post("/api/hosts", json={"name": "Loft"}, headers=auth(alice))).json()
    booking = (
        await client.post(
            "/api/booking-requests",
            json={"host_id": host["id"], "start_date": "2025-05-01", "end_date": "2025-05-02"},
            headers=auth(bob),
        )
    ).json()
    connection = (
        await client.post("/api/connections", json={"connected_user_email": bob.email}, headers=auth(alice))
    ).json()

    response = await client.get("/api/stats/bookings")
    assert response.json() == {"count": 0}

    await client.put(f"/api/booking-requests/{booking['id']}/status", json={"status": "approved"}, headers=auth(alice))
    await client.put(f"/api/connections/{connection['id']}/status", json={"status": "accepted"}, headers=auth(bob))

    assert (await client.get("/api/stats/hosts")).json() == {"count": 1}
    assert (await client.get("/api/stats/bookings")).json() == {"count": 1}
    assert (await client.get("/api/stats/connections")).json() == {"count": 1}
