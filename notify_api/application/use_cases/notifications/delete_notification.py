"""Use case for deleting a notification."""

import logging

from sqlalchemy.orm import Session

from notify_api.domain.entities import TokenClaims
from notify_api.domain.exceptions import NotFound
from notify_api.infrastructure.repositories import NotificationRepository

from .policy import ensure_can_delete

logger = logging.getLogger(__name__)


def delete_notification(session: Session, notification_id: int, *, actor: TokenClaims) -> None:
    """Delete the notification and pull it from every recipient's list."""

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFound("Notification not found")

    ensure_can_delete(notification, actor)

    if not repository.delete(notification_id):
        # Removed concurrently between the lookup and the delete.
        raise NotFound("Notification not found")
    logger.info("Notification %s deleted by %s", notification_id, actor.user_id)
