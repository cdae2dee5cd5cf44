"""Use case for rebuilding recipient back-references."""

import logging

from sqlalchemy.orm import Session

from notify_api.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def reconcile_back_references(session: Session, *, user_id: int | None = None) -> int:
    """Make back-references match notification recipients; return links changed."""

    added, removed = NotificationRepository(session).reconcile_back_references(user_id=user_id)
    if added or removed:
        logger.info(
            "Reconciled back-references (user=%s): %d added, %d removed",
            user_id if user_id is not None else "all",
            added,
            removed,
        )
    return added + removed
