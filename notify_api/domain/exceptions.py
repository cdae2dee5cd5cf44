"""Error taxonomy shared by the application and interface layers."""

from __future__ import annotations


class NotifyError(Exception):
    """Base class for every expected failure raised by the service."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(NotifyError):
    """Payload shape or content violation detected before any mutation."""

    default_message = "Invalid data"


class InvalidCredentials(NotifyError):
    """Login attempt with an unknown email, a deleted user or a wrong password."""

    default_message = "Invalid credentials"


class Unauthorized(NotifyError):
    """Missing, invalid or expired session token."""

    default_message = "Authentication required"


class InvalidToken(Unauthorized):
    """Token is malformed, carries a bad signature or lacks required claims."""

    default_message = "Invalid token"


class TokenExpired(Unauthorized):
    """Token signature is valid but its expiry timestamp has passed."""

    default_message = "Token expired"


class Forbidden(NotifyError):
    """Authenticated caller lacks the privilege required for the operation."""

    default_message = "Not allowed"


class NotFound(NotifyError):
    """Referenced record does not exist."""

    default_message = "Not found"


class DuplicateEmail(NotifyError):
    """Registration conflict on the unique email address."""

    default_message = "Email already registered"


class StoreFailure(NotifyError):
    """Underlying persistence error."""

    default_message = "Storage error"


class PartialWrite(StoreFailure):
    """A multi-step write stopped after its authoritative step.

    The notification identified by ``notification_id`` exists with its full
    recipient list, but some recipient back-references may be missing until
    they are reconciled.
    """

    default_message = "Notification stored but recipient back-references were not updated"

    def __init__(self, notification_id: int, message: str | None = None) -> None:
        self.notification_id = notification_id
        super().__init__(message)


__all__ = [
    "DuplicateEmail",
    "Forbidden",
    "InvalidCredentials",
    "InvalidInput",
    "InvalidToken",
    "NotFound",
    "NotifyError",
    "PartialWrite",
    "StoreFailure",
    "TokenExpired",
    "Unauthorized",
]
