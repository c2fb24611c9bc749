"""
Host I/O models for API requests and responses.

String-array fields (amenities, photos) are stored as JSON text. Requests may
send either a list or a JSON-encoded string, and responses always carry a list.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stay_with_friends.core.database.entities.hosts import parse_string_list

from .availabilities import AvailabilityInput, AvailabilityRead

StringList = Union[List[str], str]


class HostRead(BaseModel):
    """Schema for reading a host listing."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    name: str
    location: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    amenities: List[str] = Field(default_factory=list)
    house_rules: Optional[str] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    max_guests: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    photos: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
    availabilities: List[AvailabilityRead] = Field(default_factory=list)

    @field_validator("amenities", "photos", mode="before")
    @classmethod
    def _decode_string_list(cls, value: Any) -> List[str]:
        return parse_string_list(value)


class HostCreate(BaseModel):
    """Schema for creating a host listing."""

    user_id: Optional[str] = Field(default=None, description="Owner, must match the signed-in user when given")
    name: str = Field(description="Listing title")
    location: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    amenities: Optional[StringList] = Field(default=None, description="List or JSON array of amenities")
    house_rules: Optional[str] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    max_guests: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    photos: Optional[StringList] = Field(default=None, description="List or JSON array of photo URLs")


class HostUpdate(BaseModel):
    """Schema for partially updating a host listing.

    ``availabilities``, when present, replaces every window on the host.
    """

    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    amenities: Optional[StringList] = None
    house_rules: Optional[str] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    max_guests: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    photos: Optional[StringList] = None
    availabilities: Optional[List[AvailabilityInput]] = None
