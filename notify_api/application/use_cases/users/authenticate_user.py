"""Use case for authenticating a user."""

from sqlalchemy.orm import Session

from notify_api.domain.entities import User
from notify_api.domain.exceptions import InvalidInput
from notify_api.infrastructure.repositories import UserRepository
from notify_api.infrastructure.security import verify_password

from .validators import normalize_email


def authenticate_user(session: Session, email: str, password: str) -> User | None:
    """Return the active user matching the credentials, or ``None``.

    Unknown emails, soft-deleted users and wrong passwords are reported the
    same way.
    """

    try:
        normalized_email = normalize_email(email)
    except InvalidInput:
        return None

    user = UserRepository(session).get_by_email(normalized_email)
    if not user:
        return None

    if not verify_password(password, user.password_hash):
        return None

    return user
