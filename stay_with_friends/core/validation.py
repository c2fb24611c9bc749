"""Field validators shared by every service.

Each validator raises :class:`~stay_with_friends.core.errors.ValidationError`
with a user-facing message and returns nothing (or the normalised value) on
success. Optional fields pass when they are ``None``.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Iterable, Optional, Tuple

from .dates import parse_date
from .errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


def validate_email(email: Any) -> None:
    if not email or not isinstance(email, str):
        raise ValidationError("Email is required")
    if len(email) < 5 or len(email) > 255:
        raise ValidationError("Email must be between 5 and 255 characters")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Email must be a valid email address")


def validate_name(name: Any) -> None:
    if not name or not isinstance(name, str):
        raise ValidationError("Name is required")
    if len(name.strip()) < 1 or len(name) > 255:
        raise ValidationError("Name must be between 1 and 255 characters")


def validate_optional_text(text: Any, field_name: str, max_length: int) -> None:
    """Check an optional free-text field.

    Args:
        text: Value to check, ``None`` is accepted
        field_name: Label used in the error message
        max_length: Maximum allowed length in characters
    """
    if text is None:
        return
    if not isinstance(text, str):
        raise ValidationError(f"{field_name} must be a string")
    if len(text) > max_length:
        raise ValidationError(f"{field_name} must be no more than {max_length} characters")


def validate_coordinates(latitude: Optional[float], longitude: Optional[float]) -> None:
    if latitude is not None and (not _is_number(latitude) or latitude < -90 or latitude > 90):
        raise ValidationError("Latitude must be between -90 and 90")
    if longitude is not None and (not _is_number(longitude) or longitude < -180 or longitude > 180):
        raise ValidationError("Longitude must be between -180 and 180")


def validate_positive_integer(
    value: Any, field_name: str, max_value: Optional[int] = None, minimum: int = 0
) -> None:
    """Check an optional integer against a lower and an upper bound.

    Args:
        value: Value to check, ``None`` is accepted
        field_name: Label used in the error message
        max_value: Inclusive upper bound, unchecked when ``None``
        minimum: Inclusive lower bound
    """
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValidationError(f"{field_name} must be a positive integer")
    if max_value is not None and value > max_value:
        raise ValidationError(f"{field_name} must be no more than {max_value}")


def validate_uuid(value: Any, field_name: str) -> None:
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field_name} is required and must be a UUID string")
    if not UUID_PATTERN.match(value):
        raise ValidationError(f"{field_name} must be a valid UUID")


def validate_date_range(start: Any, end: Any) -> Tuple[date, date]:
    """Validate an inclusive stay range.

    Equal dates are a valid one-day range.

    Args:
        start: First day, a ``date`` or ``YYYY-MM-DD`` string
        end: Last day, a ``date`` or ``YYYY-MM-DD`` string

    Returns:
        The parsed ``(start, end)`` pair

    Raises:
        ValidationError: If either bound is missing or malformed, or if
            ``start`` falls after ``end``
    """
    if not start or not end:
        raise ValidationError("Start date and end date are required")
    try:
        start_date = parse_date(start)
        end_date = parse_date(end)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Invalid date format") from exc
    if start_date > end_date:
        raise ValidationError("Start date must be before or equal to end date")
    return start_date, end_date


def validate_date(value: Any, field_name: str = "Date") -> date:
    if not value:
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_date(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Invalid date format") from exc


def validate_status(status: Optional[str], allowed: Iterable[str]) -> None:
    allowed = list(allowed)
    if status and status not in allowed:
        raise ValidationError(f"Status must be one of: {', '.join(allowed)}")


def validate_url(url: Any, field_name: str = "URL") -> None:
    if not url or not isinstance(url, str):
        raise ValidationError(f"{field_name} is required")
    if not URL_PATTERN.match(url):
        raise ValidationError(f"{field_name} must be a valid URL")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
