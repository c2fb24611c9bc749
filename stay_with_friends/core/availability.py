"""Availability window matching.

A window is anything with ``start_date``, ``end_date`` and ``status``: an
``Availability`` row, an I/O model or a plain mapping. Both ends of a window
are inclusive, and only windows whose status is ``available`` ever match.
Every date query in the backend goes through these functions or mirrors
their semantics in SQL.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List, Mapping

from .dates import DateLike, days_in_range, parse_date

AVAILABLE = "available"


def _field(window: Any, name: str) -> Any:
    if isinstance(window, Mapping):
        return window.get(name)
    return getattr(window, name, None)


def _status(window: Any) -> str:
    status = _field(window, "status")
    # Enum members compare by value
    return getattr(status, "value", status)


def is_open(window: Any) -> bool:
    return _status(window) == AVAILABLE


def covers(window: Any, candidate: DateLike) -> bool:
    """Whether an available window contains ``candidate``."""
    if not is_open(window):
        return False
    day = parse_date(candidate)
    return parse_date(_field(window, "start_date")) <= day <= parse_date(_field(window, "end_date"))


def overlaps(window: Any, start: DateLike, end: DateLike) -> bool:
    """Whether an available window intersects the inclusive range ``[start, end]``."""
    if not is_open(window):
        return False
    return parse_date(_field(window, "start_date")) <= parse_date(end) and parse_date(
        _field(window, "end_date")
    ) >= parse_date(start)


def is_available_on(candidate: DateLike, windows: Iterable[Any]) -> bool:
    return any(covers(window, candidate) for window in windows)


def windows_covering(candidate: DateLike, windows: Iterable[Any]) -> List[Any]:
    return [window for window in windows if covers(window, candidate)]


def windows_overlapping(start: DateLike, end: DateLike, windows: Iterable[Any]) -> List[Any]:
    return [window for window in windows if overlaps(window, start, end)]


def available_dates(start: DateLike, end: DateLike, windows: Iterable[Any]) -> List[date]:
    """Distinct days in ``[start, end]`` covered by at least one available window.

    Args:
        start: First day of the query range
        end: Last day of the query range
        windows: Candidate windows, any status

    Returns:
        Sorted list of days. Inverted ranges give an empty list.
    """
    open_windows = [
        (parse_date(_field(w, "start_date")), parse_date(_field(w, "end_date"))) for w in windows if is_open(w)
    ]
    return [day for day in days_in_range(start, end) if any(lo <= day <= hi for lo, hi in open_windows)]
