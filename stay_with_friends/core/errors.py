"""Error types for the Stay With Friends backend.

Defines a small hierarchy of exceptions raised by validators, repositories and
services. The server layer maps each class onto an HTTP status code, so code
below the API never needs to know about HTTP.
"""

from __future__ import annotations


class StayWithFriendsError(Exception):
    """Base error for all domain exceptions."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StayWithFriendsError):
    """Raised when input fails a business validation rule."""

    status_code = 400


class AuthenticationRequiredError(StayWithFriendsError):
    """Raised when an operation needs a signed-in user and none was forwarded."""

    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class PermissionDeniedError(StayWithFriendsError):
    """Raised when the signed-in user may not act on the target resource."""

    status_code = 403

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__(message)


class NotFoundError(StayWithFriendsError):
    """Raised when a referenced entity does not exist."""

    status_code = 404

    def __init__(self, entity: str, identifier: str | None = None) -> None:
        message = f"{entity} not found" if identifier is None else f"{entity} '{identifier}' not found"
        super().__init__(message)
        self.entity = entity
        self.identifier = identifier


class ConflictError(StayWithFriendsError):
    """Raised when a write would duplicate an existing record."""

    status_code = 409


class PayloadTooLargeError(StayWithFriendsError):
    """Raised when an uploaded file exceeds the configured limit."""

    status_code = 413
