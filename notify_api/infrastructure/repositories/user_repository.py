"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from notify_api.domain.entities import User
from notify_api.domain.exceptions import DuplicateEmail, StoreFailure
from notify_api.infrastructure.models import UserModel
from notify_api.infrastructure.repositories.base import commit
from notify_api.utils import ensure_utc, now_utc_naive, to_naive_utc


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int, *, include_deleted: bool = False) -> User | None:
        model = self._get_model(include_deleted=include_deleted, id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str, *, include_deleted: bool = False) -> User | None:
        model = self._get_model(include_deleted=include_deleted, email=email)
        return self._to_entity(model) if model else None

    def list_active_ids(self, user_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``user_ids`` that belong to non-deleted users."""

        unique_ids = {int(user_id) for user_id in user_ids}
        if not unique_ids:
            return set()
        query = (
            self.session.query(UserModel.id)
            .filter(UserModel.id.in_(sorted(unique_ids)))
            .filter(UserModel.is_deleted.is_(False))
        )
        return {user_id for (user_id,) in query.all()}

    def create(self, user: User) -> User:
        model = UserModel()
        model.email = user.email
        model.username = user.username
        model.password_hash = user.password_hash
        model.is_admin = user.is_admin
        model.is_deleted = user.is_deleted
        model.created_at = to_naive_utc(user.created_at) or now_utc_naive()
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            # The unique index on ``email`` covers deleted rows as well.
            self.session.rollback()
            raise DuplicateEmail() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreFailure("Could not create user") from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def set_admin(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        if model is None:
            return None
        if not model.is_admin:
            model.is_admin = True
            self.session.add(model)
            commit(self.session, action="grant admin privileges")
            self.session.refresh(model)
        return self._to_entity(model)

    def soft_delete(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        if model is None:
            return None
        model.is_deleted = True
        self.session.add(model)
        commit(self.session, action="delete user")
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, include_deleted: bool = False, **filters) -> UserModel | None:
        query = self.session.query(UserModel)
        if not include_deleted:
            query = query.filter(UserModel.is_deleted.is_(False))
        return query.filter_by(**filters).first()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            username=model.username,
            password_hash=model.password_hash,
            is_admin=model.is_admin,
            is_deleted=model.is_deleted,
            created_at=ensure_utc(model.created_at),
            notification_ids=[notification.id for notification in model.inbox],
        )


__all__ = ["UserRepository"]
