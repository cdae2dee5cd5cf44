"""Helper utilities shared across API route handlers."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from notify_api.domain.exceptions import (
    DuplicateEmail,
    Forbidden,
    InvalidCredentials,
    InvalidInput,
    NotFound,
    NotifyError,
    PartialWrite,
    StoreFailure,
    Unauthorized,
)

# Most specific classes first.
_STATUS_BY_ERROR: tuple[tuple[type[NotifyError], int], ...] = (
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentials, status.HTTP_401_UNAUTHORIZED),
    (Unauthorized, status.HTTP_401_UNAUTHORIZED),
    (Forbidden, status.HTTP_403_FORBIDDEN),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (DuplicateEmail, status.HTTP_409_CONFLICT),
    (StoreFailure, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

_DEFAULT_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: "Invalid data",
    status.HTTP_401_UNAUTHORIZED: "Authentication required",
    status.HTTP_403_FORBIDDEN: "Not allowed",
    status.HTTP_404_NOT_FOUND: "Not found",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Unexpected error",
}


def status_for(exc: NotifyError) -> int:
    """Return the HTTP status code that reports ``exc``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_envelope(message: str, error: str, **extra: Any) -> dict[str, Any]:
    """Build the ``{message, error}`` body used by every failed request."""

    return {"message": message, "error": error, **extra}


def http_error(exc: NotifyError, *, message: str | None = None) -> HTTPException:
    """Translate a domain error into an :class:`HTTPException` with an envelope."""

    status_code = status_for(exc)
    extra: dict[str, Any] = {}
    if isinstance(exc, PartialWrite):
        extra["notification_id"] = exc.notification_id

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return HTTPException(
        status_code=status_code,
        detail=error_envelope(
            message or _DEFAULT_MESSAGES.get(status_code, "Request failed"),
            exc.message,
            **extra,
        ),
        headers=headers,
    )
