"""
Host service.

Listings, their availability windows and the search used by guests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

from sqlalchemy.ext.asyncio import AsyncSession

from stay_with_friends.core.database.entities.availabilities import Availability
from stay_with_friends.core.database.entities.hosts import Host, dump_string_list
from stay_with_friends.core.database.repositories import AvailabilityRepository, HostRepository
from stay_with_friends.core.database.utils import utc_now
from stay_with_friends.core.errors import NotFoundError, PermissionDeniedError
from stay_with_friends.core.logging_config import get_logger
from stay_with_friends.core.models.domain.enums import AvailabilityStatus
from stay_with_friends.core.models.io.availabilities import AvailabilityInput, AvailabilityRead
from stay_with_friends.core.models.io.hosts import HostCreate, HostRead, HostUpdate
from stay_with_friends.core.monitoring import log_domain_event
from stay_with_friends.core.validation import (
    validate_coordinates,
    validate_date,
    validate_date_range,
    validate_name,
    validate_optional_text,
    validate_positive_integer,
    validate_status,
)
from stay_with_friends.server.core.config import settings

from .base import BaseService, Identity

logger = get_logger(__name__)

TEXT_LIMITS = {
    "location": ("Location", 255),
    "description": ("Description", 2000),
    "address": ("Address", 255),
    "city": ("City", 100),
    "state": ("State", 100),
    "zip_code": ("Zip code", 20),
    "country": ("Country", 100),
    "house_rules": ("House rules", 2000),
}

COUNT_LIMITS = {
    "max_guests": ("Max guests", 50),
    "bedrooms": ("Bedrooms", 20),
    "bathrooms": ("Bathrooms", 20),
}

UPLOADS_MARKER = "/uploads/"


def validate_host_fields(fields: Dict[str, Any]) -> None:
    """Apply the listing field rules to the keys present in ``fields``.

    Raises:
        ValidationError: On the first failing field
    """
    if "name" in fields:
        validate_name(fields["name"])
    for key, (label, limit) in TEXT_LIMITS.items():
        if key in fields:
            validate_optional_text(fields[key], label, limit)
    validate_coordinates(fields.get("latitude"), fields.get("longitude"))
    for key, (label, limit) in COUNT_LIMITS.items():
        if key in fields:
            validate_positive_integer(fields[key], label, limit)


class HostService(BaseService):
    """Business rules for host listings."""

    def __init__(self, session: AsyncSession, uploads_dir: Optional[Path] = None) -> None:
        super().__init__(session)
        self.hosts = HostRepository(session)
        self.availabilities = AvailabilityRepository(session)
        self.uploads_dir = Path(uploads_dir or settings.uploads.dir)

    async def _to_reads(self, hosts: Iterable[Host]) -> List[HostRead]:
        hosts = list(hosts)
        windows = await self.availabilities.list_by_hosts(host.id for host in hosts)
        return [
            HostRead.model_validate(host).model_copy(
                update={"availabilities": [AvailabilityRead.model_validate(w) for w in windows[host.id]]}
            )
            for host in hosts
        ]

    async def _to_read(self, host: Host) -> HostRead:
        return (await self._to_reads([host]))[0]

    async def _get_owned(self, host_id: str, identity: Identity, action: str) -> Host:
        host = await self.hosts.get_by_id(host_id)
        if host is None:
            raise NotFoundError("Host")
        if host.user_id != identity.user_id:
            raise PermissionDeniedError(f"Unauthorized: Can only {action} your own hosts")
        return host

    async def list_hosts(self) -> List[HostRead]:
        return await self._to_reads(await self.hosts.list())

    async def get_host(self, host_id: str) -> HostRead:
        host = await self.hosts.get_by_id(host_id)
        if host is None:
            raise NotFoundError("Host")
        return await self._to_read(host)

    async def search_hosts(self, query: Optional[str] = None, start_date: Optional[str] = None) -> List[HostRead]:
        """Search listings by text and optionally by arrival day.

        Args:
            query: Case-insensitive substring of name, description, location, city or state
            start_date: Only keep hosts with an available window covering this day

        Returns:
            Matching hosts ordered by name
        """
        day = None
        if start_date:
            day = validate_date(start_date, "Start date")
        hosts = await self.hosts.search((query or "").strip() or None, day)
        logger.debug(f"Host search query={query!r} start_date={start_date} -> {len(hosts)} results")
        return await self._to_reads(hosts)

    async def host_availabilities(self, host_id: str) -> List[AvailabilityRead]:
        if await self.hosts.get_by_id(host_id) is None:
            raise NotFoundError("Host")
        return [AvailabilityRead.model_validate(w) for w in await self.availabilities.list_by_host(host_id)]

    async def create_host(self, data: HostCreate, identity: Identity) -> HostRead:
        """Create a listing owned by the caller.

        Raises:
            PermissionDeniedError: If ``user_id`` names someone else
            ValidationError: If a field breaks the listing rules
        """
        identity.require_self(data.user_id, "Unauthorized: Can only create hosts for yourself")
        fields = data.model_dump(exclude={"user_id", "amenities", "photos"})
        validate_host_fields(fields)

        host = Host(**fields, user_id=identity.user_id)
        host.set_amenities_list(data.amenities or [])
        host.set_photos_list(data.photos or [])
        async with self.transaction():
            await self.hosts.create(host)
        log_domain_event("host.created", host_id=host.id, user_id=identity.user_id)
        return await self._to_read(host)

    async def update_host(self, host_id: str, data: HostUpdate, identity: Identity) -> HostRead:
        """Partially update a listing owned by the caller.

        Photos that were dropped and live in the uploads directory are
        deleted once the update is committed. A given ``availabilities`` list
        replaces every window on the host.
        """
        host = await self._get_owned(host_id, identity, "update")
        changes = data.model_dump(exclude_unset=True, exclude={"availabilities"})
        validate_host_fields(changes)
        windows = self._build_windows(host_id, data.availabilities) if data.availabilities is not None else None

        removed_photos: List[str] = []
        async with self.transaction():
            if "amenities" in changes:
                host.amenities = dump_string_list(changes.pop("amenities"))
            if "photos" in changes:
                previous = host.get_photos_list()
                host.photos = dump_string_list(changes.pop("photos"))
                current = set(host.get_photos_list())
                removed_photos = [url for url in previous if url not in current]
            for key, value in changes.items():
                setattr(host, key, value)
            host.updated_at = utc_now()
            await self.hosts.update(host)
            if windows is not None:
                await self.availabilities.delete_by_host(host_id)
                for window in windows:
                    await self.availabilities.create(window)

        await self._remove_uploaded_files(removed_photos)
        log_domain_event("host.updated", host_id=host_id, fields=sorted(data.model_fields_set))
        return await self._to_read(host)

    async def delete_host(self, host_id: str, identity: Identity) -> None:
        host = await self._get_owned(host_id, identity, "delete")
        photos = host.get_photos_list()
        async with self.transaction():
            await self.hosts.delete_cascade(host_id)
        await self._remove_uploaded_files(photos)
        log_domain_event("host.deleted", host_id=host_id, user_id=identity.user_id)

    def _build_windows(self, host_id: str, items: List[AvailabilityInput]) -> List[Availability]:
        windows = []
        for item in items:
            start, end = validate_date_range(item.start_date, item.end_date)
            status = item.status or AvailabilityStatus.AVAILABLE.value
            validate_status(status, AvailabilityStatus.values())
            validate_optional_text(item.notes, "Notes", 500)
            windows.append(Availability(host_id=host_id, start_date=start, end_date=end, status=status, notes=item.notes))
        return windows

    async def _still_listed(self, name: str) -> bool:
        for host in await self.hosts.list_referencing_photo(name):
            if any(Path(urlparse(url).path).name == name for url in host.get_photos_list()):
                return True
        return False

    async def _remove_uploaded_files(self, urls: Iterable[str]) -> None:
        """Delete dropped uploads that no stored host lists any more.

        A listing can reference a file uploaded for another listing, so the
        file is only removed once nothing points at it.
        """
        for url in urls:
            if UPLOADS_MARKER not in url:
                continue
            name = Path(urlparse(url).path).name
            if not name:
                continue
            if await self._still_listed(name):
                logger.info(f"Kept uploaded file {name}, another host still lists it")
                continue
            path = self.uploads_dir / name
            try:
                path.unlink(missing_ok=True)
                logger.info(f"Deleted uploaded file {path}")
            except OSError as exc:
                logger.warning(f"Could not delete uploaded file {path}: {exc}")