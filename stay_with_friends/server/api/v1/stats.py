"""
Statistics API Endpoints.

Aggregate counts shown on the landing page.
"""

from __future__ import annotations

from fastapi import APIRouter

from stay_with_friends.core.models.io.stats import CountResult, SiteStats
from stay_with_friends.server.services.deps import StatsServiceDep

router = APIRouter(tags=["stats"])


@router.get(
    "",
    response_model=SiteStats,
    summary="Site Statistics",
    description="Total hosts, accepted connections and approved bookings.",
)
async def site_stats(service: StatsServiceDep) -> SiteStats:
    return await service.site_stats()


@router.get("/hosts", response_model=CountResult, summary="Total Hosts")
async def total_hosts(service: StatsServiceDep) -> CountResult:
    return CountResult(count=await service.total_hosts())


@router.get(
    "/connections",
    response_model=CountResult,
    summary="Total Connections",
    description="Accepted connection rows. A mutual friendship stored in both directions counts twice.",
)
async def total_connections(service: StatsServiceDep) -> CountResult:
    return CountResult(count=await service.total_connections())


@router.get("/bookings", response_model=CountResult, summary="Total Approved Bookings")
async def total_bookings(service: StatsServiceDep) -> CountResult:
    return CountResult(count=await service.total_bookings())
