"""Use case for soft-deleting a user."""

import logging

from sqlalchemy.orm import Session

from notify_api.domain.entities import TokenClaims, User
from notify_api.domain.exceptions import Forbidden, NotFound
from notify_api.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def delete_user(session: Session, user_id: int, *, actor: TokenClaims) -> User:
    """Flag the user as deleted. Admins may delete anyone, users only themselves.

    The record stays in storage; it just stops being found by active lookups.
    """

    if not actor.is_admin and actor.user_id != user_id:
        raise Forbidden("Admin privileges required")

    user = UserRepository(session).soft_delete(user_id)
    if user is None:
        raise NotFound("User not found")
    logger.info("User %s soft deleted by %s", user_id, actor.user_id)
    return user
