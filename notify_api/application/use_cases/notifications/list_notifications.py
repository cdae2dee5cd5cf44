"""Use cases for reading the caller's notifications."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from notify_api.domain.entities import Notification
from notify_api.domain.exceptions import InvalidInput
from notify_api.infrastructure.repositories import NotificationRepository
from notify_api.utils import ensure_utc


def list_notifications(
    session: Session, user_id: int, *, newest_first: bool = False
) -> Sequence[Notification]:
    """Return every notification whose recipients include ``user_id``."""

    return NotificationRepository(session).list_for_user(user_id, newest_first=newest_first)


def list_notifications_between(
    session: Session,
    user_id: int,
    *,
    start: datetime | None = None,
    end: datetime | None = None,
) -> Sequence[Notification]:
    """Return the user's notifications created within ``[start, end]``, newest first.

    Either bound may be omitted. Naive datetimes are read as UTC.
    """

    start = ensure_utc(start)
    end = ensure_utc(end)
    if start is not None and end is not None and start > end:
        raise InvalidInput("start must not be later than end")

    return NotificationRepository(session).list_for_user(
        user_id,
        newest_first=True,
        created_from=start,
        created_to=end,
    )
