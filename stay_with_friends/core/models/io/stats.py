"""
Statistics and upload I/O models.
"""

from __future__ import annotations

from pydantic import BaseModel


class SiteStats(BaseModel):
    total_hosts: int
    total_connections: int
    total_bookings: int


class CountResult(BaseModel):
    count: int


class UploadResult(BaseModel):
    url: str
