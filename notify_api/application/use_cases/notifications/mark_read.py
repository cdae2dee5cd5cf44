"""Use cases for updating the shared read flag of notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notify_api.domain.exceptions import InvalidInput
from notify_api.infrastructure.repositories import NotificationRepository


def mark_read(session: Session, notification_ids: Sequence[int], *, user_id: int) -> int:
    """Mark the given notifications as read and return how many changed.

    Ids that are not addressed to ``user_id`` are skipped without error. The
    flag is shared, so every other recipient sees the notification as read too.
    """

    if not notification_ids:
        raise InvalidInput("At least one notification id is required")
    return NotificationRepository(session).mark_as_read(notification_ids, user_id=user_id)


def mark_all_read(session: Session, *, user_id: int) -> int:
    """Mark every unread notification addressed to ``user_id`` as read."""

    return NotificationRepository(session).mark_all_as_read(user_id=user_id)
