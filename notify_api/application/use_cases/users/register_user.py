"""Use case for registering users."""

import logging

from sqlalchemy.orm import Session

from notify_api.domain.entities import User
from notify_api.domain.exceptions import DuplicateEmail
from notify_api.infrastructure.repositories import UserRepository
from notify_api.infrastructure.security import get_password_hash
from notify_api.utils import now_utc

from .validators import ensure_valid_password, ensure_valid_username, normalize_email

logger = logging.getLogger(__name__)


def register_user(
    session: Session,
    *,
    email: str,
    username: str,
    password: str,
    is_admin: bool = False,
) -> User:
    """Create a new user ensuring unique email addresses.

    Soft-deleted users keep their email, so it cannot be registered again.
    """

    normalized_email = normalize_email(email)
    normalized_username = ensure_valid_username(username)
    ensure_valid_password(password)

    repository = UserRepository(session)
    if repository.get_by_email(normalized_email, include_deleted=True):
        raise DuplicateEmail()

    user = User(
        id=None,
        email=normalized_email,
        username=normalized_username,
        password_hash=get_password_hash(password),
        is_admin=is_admin,
        is_deleted=False,
        created_at=now_utc(),
    )
    created = repository.create(user)
    logger.info("Registered user %s (id=%s, admin=%s)", created.email, created.id, created.is_admin)
    return created
