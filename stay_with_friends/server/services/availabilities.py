"""
Availability service.

Publishing windows on a host and answering "who is free on these dates".
"""

from __future__ import annotations

from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database.entities.availabilities import Availability
from stay_with_friends.core.database.entities.hosts import Host
from stay_with_friends.core.database.repositories import AvailabilityRepository, HostRepository
from stay_with_friends.core.dates import format_date
from stay_with_friends.core.errors import NotFoundError, PermissionDeniedError
from stay_with_friends.core.models.domain.enums import AvailabilityStatus
from stay_with_friends.core.models.io.availabilities import AvailabilityCreate, AvailabilityRead, HostSummary
from stay_with_friends.core.monitoring import log_domain_event
from stay_with_friends.core.validation import (
    validate_date,
    validate_date_range,
    validate_optional_text,
    validate_status,
)

from .base import BaseService, Identity


class AvailabilityService(BaseService):
    """Business rules for availability windows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.hosts = HostRepository(session)
        self.availabilities = AvailabilityRepository(session)

    async def _with_hosts(self, windows: List[Availability]) -> List[AvailabilityRead]:
        hosts: Dict[str, Host] = {}
        for host_id in {w.host_id for w in windows}:
            host = await self.hosts.get_by_id(host_id)
            if host is not None:
                hosts[host_id] = host
        reads = []
        for window in windows:
            host = hosts.get(window.host_id)
            summary = HostSummary.model_validate(host) if host is not None else None
            reads.append(AvailabilityRead.model_validate(window).model_copy(update={"host": summary}))
        return reads

    async def create_availability(self, data: AvailabilityCreate, identity: Identity) -> AvailabilityRead:
        """Publish a window on a host owned by the caller.

        Raises:
            NotFoundError: If the host does not exist
            PermissionDeniedError: If the caller does not own the host
            ValidationError: If the range, status or notes are invalid
        """
        host = await self.hosts.get_by_id(data.host_id)
        if host is None:
            raise NotFoundError("Host")
        if host.user_id != identity.user_id:
            raise PermissionDeniedError("Unauthorized: Can only add availability to your own hosts")

        start, end = validate_date_range(data.start_date, data.end_date)
        status = data.status or AvailabilityStatus.AVAILABLE.value
        validate_status(status, AvailabilityStatus.values())
        validate_optional_text(data.notes, "Notes", 500)

        window = Availability(host_id=host.id, start_date=start, end_date=end, status=status, notes=data.notes)
        async with self.transaction():
            await self.availabilities.create(window)
        log_domain_event("availability.created", host_id=host.id, start_date=str(start), end_date=str(end))
        return AvailabilityRead.model_validate(window).model_copy(update={"host": HostSummary.model_validate(host)})

    async def by_date(self, day: str) -> List[AvailabilityRead]:
        """Available windows covering one day."""
        return await self._with_hosts(await self.availabilities.list_covering(validate_date(day)))

    async def by_date_range(self, start_date: str, end_date: str) -> List[AvailabilityRead]:
        """Available windows that intersect an inclusive range."""
        start, end = validate_date_range(start_date, end_date)
        return await self._with_hosts(await self.availabilities.list_overlapping(start, end))

    async def available_dates(self, start_date: str, end_date: str) -> List[str]:
        """Days in the range that at least one host has available, as ``YYYY-MM-DD``."""
        start, end = validate_date_range(start_date, end_date)
        return [format_date(day) for day in await self.availabilities.available_dates(start, end)]
