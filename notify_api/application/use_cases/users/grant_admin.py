"""Use case for granting administrator privileges."""

import logging

from sqlalchemy.orm import Session

from notify_api.domain.entities import User
from notify_api.domain.exceptions import NotFound
from notify_api.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def grant_admin(session: Session, user_id: int, *, granted_by: int | None = None) -> User:
    """Mark the user as administrator; repeated grants are harmless."""

    user = UserRepository(session).set_admin(user_id)
    if user is None:
        raise NotFound("User not found")
    logger.info("User %s granted admin privileges by %s", user_id, granted_by)
    return user
