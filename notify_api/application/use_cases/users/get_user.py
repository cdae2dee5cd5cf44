"""Use cases for retrieving users."""

from sqlalchemy.orm import Session

from notify_api.domain.entities import User
from notify_api.domain.exceptions import InvalidInput, NotFound
from notify_api.infrastructure.repositories import UserRepository

from .validators import normalize_email


def get_user(session: Session, user_id: int) -> User:
    """Return the active user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def find_active_by_email(session: Session, email: str) -> User | None:
    """Return the non-deleted user registered with ``email``, if any."""

    try:
        normalized_email = normalize_email(email)
    except InvalidInput:
        return None
    return UserRepository(session).get_by_email(normalized_email)
