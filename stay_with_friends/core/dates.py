"""Calendar date helpers.

Stay dates are plain calendar days serialised as ``YYYY-MM-DD``. The helpers
accept either ``date`` objects or ISO strings so callers can pass request
values straight through.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Union

DateLike = Union[date, datetime, str]

ISO_FORMAT = "%Y-%m-%d"


def parse_date(value: DateLike) -> date:
    """Parse a date-like value into a ``date``.

    Strings may be a bare ``YYYY-MM-DD`` day or a full ISO timestamp, in
    which case only the calendar day is kept.

    Raises:
        ValueError: If the string is not an ISO date
        TypeError: If the value is not a date, datetime or string
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Cannot parse date from {type(value).__name__}")
    text = value.strip()
    if len(text) > 10:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    return date.fromisoformat(text)


def format_date(value: DateLike, fmt: str = ISO_FORMAT) -> str:
    return parse_date(value).strftime(fmt)


def format_display_date(value: DateLike) -> str:
    return format_date(value, "%b %d, %Y")


def format_date_range(start: DateLike, end: DateLike) -> str:
    """Render a stay range for people, collapsing a shared month or year.

    ``Nov 19-24, 2025``, ``Nov 19 - Dec 24, 2025``, ``Dec 30, 2025 - Jan 2, 2026``.
    """
    start_date = parse_date(start)
    end_date = parse_date(end)
    if start_date.year != end_date.year:
        return f"{start_date:%b} {start_date.day}, {start_date.year} - {end_date:%b} {end_date.day}, {end_date.year}"
    if start_date.month != end_date.month:
        return f"{start_date:%b} {start_date.day} - {end_date:%b} {end_date.day}, {end_date.year}"
    if start_date.day == end_date.day:
        return f"{start_date:%b} {start_date.day}, {start_date.year}"
    return f"{start_date:%b} {start_date.day}-{end_date.day}, {start_date.year}"


def is_valid_date_string(value: str) -> bool:
    try:
        parse_date(value)
    except (TypeError, ValueError):
        return False
    return True


def add_days(value: DateLike, days: int) -> date:
    return parse_date(value) + timedelta(days=days)


def days_in_range(start: DateLike, end: DateLike) -> List[date]:
    """Every day from ``start`` to ``end`` inclusive, empty if inverted."""
    current = parse_date(start)
    last = parse_date(end)
    days: List[date] = []
    while current <= last:
        days.append(current)
        current += timedelta(days=1)
    return days


def days_between(start: DateLike, end: DateLike) -> int:
    return (parse_date(end) - parse_date(start)).days


def is_date_in_range(value: DateLike, start: DateLike, end: DateLike) -> bool:
    return parse_date(start) <= parse_date(value) <= parse_date(end)


def today() -> date:
    return date.today()


def is_date_in_past(value: DateLike) -> bool:
    return parse_date(value) < today()
