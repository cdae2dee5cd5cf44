"""Use case for sending a notification to a set of users."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notify_api.domain.entities import Notification, TokenClaims
from notify_api.domain.exceptions import InvalidInput, PartialWrite, StoreFailure
from notify_api.infrastructure.repositories import NotificationRepository, UserRepository
from notify_api.utils import now_utc

from .policy import ensure_can_create

logger = logging.getLogger(__name__)

MESSAGE_MAX_LENGTH = 1000


def _unique(values: Sequence[int]) -> list[int]:
    unique: list[int] = []
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique


def create_notification(
    session: Session,
    *,
    message: str,
    recipient_ids: Sequence[int],
    actor: TokenClaims,
) -> Notification:
    """Store a notification and link it to each recipient.

    The write happens in two steps. The notification and its recipient list
    are committed first; the recipients' back-references are added next. When
    the second step fails a :class:`PartialWrite` is raised, the notification
    is kept, and the links can be rebuilt with
    :func:`reconcile_back_references`.
    """

    ensure_can_create(actor)

    text = (message or "").strip()
    if not text:
        raise InvalidInput("Message is required")
    if len(text) > MESSAGE_MAX_LENGTH:
        raise InvalidInput(f"Message must be at most {MESSAGE_MAX_LENGTH} characters long")

    recipients = _unique(list(recipient_ids or []))
    if not recipients:
        raise InvalidInput("At least one recipient is required")

    active_ids = UserRepository(session).list_active_ids(recipients)
    unknown = [user_id for user_id in recipients if user_id not in active_ids]
    if unknown:
        raise InvalidInput(f"Unknown recipients: {', '.join(str(u) for u in unknown)}")

    repository = NotificationRepository(session)
    notification = repository.create(
        Notification(
            id=None,
            message=text,
            recipient_ids=recipients,
            is_read=False,
            created_at=now_utc(),
        )
    )

    try:
        repository.add_back_references(notification.id, notification.recipient_ids)
    except (StoreFailure, SQLAlchemyError) as exc:
        session.rollback()
        logger.warning(
            "Notification %s stored without recipient back-references: %s",
            notification.id,
            exc,
        )
        raise PartialWrite(notification.id) from exc

    logger.info(
        "Notification %s created by %s for %d recipient(s)",
        notification.id,
        actor.user_id,
        len(notification.recipient_ids),
    )
    return notification
