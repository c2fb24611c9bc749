"""
Host entity model.

A host is a listing: a spare room or a home that a user offers to people in
their network. Amenities and photos are string arrays stored as JSON text.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, List, Optional

from sqlmodel import Field

from ..base import Base
from ..utils import UTCTimestamp, new_id, utc_now

# Marks TEXT columns that hold a JSON string array
JSON_ARRAY = {"info": {"json_array": True}}


def parse_string_list(value: Any) -> List[str]:
    """Decode a stored JSON array, falling back to an empty list."""
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    try:
        decoded = json.loads(value)
    except (json.JSONDecodeError, TypeError):
        return []
    if not isinstance(decoded, list):
        return []
    return [str(item) for item in decoded]


def dump_string_list(value: Any) -> Optional[str]:
    """Encode a list (or an already encoded JSON string) for storage."""
    if value is None:
        return None
    return json.dumps(parse_string_list(value))


class HostBase(Base):
    """Base fields for a host listing."""

    name: str = Field(description="Listing title")
    location: Optional[str] = Field(default=None, description="Free-form location label")
    description: Optional[str] = Field(default=None, description="Listing description")
    address: Optional[str] = Field(default=None)
    city: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None)
    zip_code: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None)
    latitude: Optional[float] = Field(default=None)
    longitude: Optional[float] = Field(default=None)
    amenities: Optional[str] = Field(default=None, sa_column_kwargs=JSON_ARRAY, description="JSON array of amenities")
    house_rules: Optional[str] = Field(default=None)
    check_in_time: Optional[str] = Field(default=None, description="Check-in time, e.g. '15:00'")
    check_out_time: Optional[str] = Field(default=None, description="Check-out time, e.g. '11:00'")
    max_guests: Optional[int] = Field(default=None)
    bedrooms: Optional[int] = Field(default=None)
    bathrooms: Optional[int] = Field(default=None)
    photos: Optional[str] = Field(default=None, sa_column_kwargs=JSON_ARRAY, description="JSON array of photo URLs")


class Host(HostBase, table=True):
    """Persistent host listing.

    Table: hosts
    """

    __tablename__ = "hosts"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: Optional[str] = Field(default=None, foreign_key="users.id", index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCTimestamp)
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=UTCTimestamp, sa_column_kwargs={"onupdate": utc_now}
    )

    def get_amenities_list(self) -> List[str]:
        return parse_string_list(self.amenities)

    def set_amenities_list(self, amenities: Any) -> None:
        self.amenities = dump_string_list(amenities)

    def get_photos_list(self) -> List[str]:
        return parse_string_list(self.photos)

    def set_photos_list(self, photos: Any) -> None:
        self.photos = dump_string_list(photos)

    def __repr__(self) -> str:
        return f"Host(id={self.id}, name={self.name}, user_id={self.user_id})"
