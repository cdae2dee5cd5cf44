"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.orm import Session

from notify_api.domain.entities import Notification
from notify_api.infrastructure.models import (
    NotificationModel,
    UserModel,
    notification_recipient_table,
    user_notification_table,
)
from notify_api.infrastructure.repositories.base import commit
from notify_api.utils import ensure_utc, now_utc_naive, to_naive_utc


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects.

    Recipients stored in ``notification_recipient`` are the source of truth.
    The ``user_notification`` back-references are maintained as a second
    step and can always be rebuilt with :meth:`reconcile_back_references`.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        newest_first: bool = False,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.id.in_(self._addressed_to(user_id))
        )
        if created_from is not None:
            query = query.filter(NotificationModel.created_at >= to_naive_utc(created_from))
        if created_to is not None:
            query = query.filter(NotificationModel.created_at <= to_naive_utc(created_to))
        if newest_first:
            query = query.order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
        else:
            query = query.order_by(NotificationModel.id)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        """Persist ``notification`` with its recipient list in a single commit."""

        recipients = (
            self.session.query(UserModel)
            .filter(UserModel.id.in_(sorted(set(notification.recipient_ids))))
            .all()
        )
        model = NotificationModel(
            message=notification.message,
            is_read=notification.is_read,
            created_at=to_naive_utc(notification.created_at) or now_utc_naive(),
        )
        model.recipients = recipients
        self.session.add(model)
        commit(self.session, action="create notification")
        self.session.refresh(model)
        return self._to_entity(model)

    def add_back_references(self, notification_id: int, user_ids: Iterable[int]) -> int:
        """Link ``notification_id`` into each user's back-reference list.

        Existing links are left untouched so the call can be repeated safely.
        Returns the number of links inserted.
        """

        wanted = {int(user_id) for user_id in user_ids}
        if not wanted:
            return 0
        existing = set(
            self.session.execute(
                select(user_notification_table.c.user_id).where(
                    user_notification_table.c.notification_id == notification_id
                )
            ).scalars()
        )
        missing = sorted(wanted - existing)
        if missing:
            self.session.execute(
                insert(user_notification_table),
                [{"user_id": user_id, "notification_id": notification_id} for user_id in missing],
            )
            commit(self.session, action="update recipient back-references")
        return len(missing)

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: int) -> int:
        ids = {notification_id for notification_id in notification_ids if notification_id is not None}
        if not ids:
            return 0
        modified = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(sorted(ids)),
                NotificationModel.id.in_(self._addressed_to(user_id)),
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        commit(self.session, action="mark notifications as read")
        return modified

    def mark_all_as_read(self, *, user_id: int) -> int:
        modified = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(self._addressed_to(user_id)),
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        commit(self.session, action="mark all notifications as read")
        return modified

    def delete(self, notification_id: int) -> bool:
        """Remove the notification, its recipients and every back-reference."""

        self.session.execute(
            delete(user_notification_table).where(
                user_notification_table.c.notification_id == notification_id
            )
        )
        self.session.execute(
            delete(notification_recipient_table).where(
                notification_recipient_table.c.notification_id == notification_id
            )
        )
        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .delete(synchronize_session=False)
        )
        commit(self.session, action="delete notification")
        return bool(deleted)

    def reconcile_back_references(self, *, user_id: int | None = None) -> tuple[int, int]:
        """Rebuild back-references from the recipient lists.

        Returns ``(added, removed)`` link counts. Running it twice in a row
        yields ``(0, 0)`` the second time.
        """

        expected_query = select(
            notification_recipient_table.c.user_id,
            notification_recipient_table.c.notification_id,
        )
        current_query = select(
            user_notification_table.c.user_id,
            user_notification_table.c.notification_id,
        )
        if user_id is not None:
            expected_query = expected_query.where(notification_recipient_table.c.user_id == user_id)
            current_query = current_query.where(user_notification_table.c.user_id == user_id)

        expected = {tuple(row) for row in self.session.execute(expected_query)}
        current = {tuple(row) for row in self.session.execute(current_query)}
        missing = sorted(expected - current)
        stale = sorted(current - expected)

        if missing:
            self.session.execute(
                insert(user_notification_table),
                [{"user_id": uid, "notification_id": nid} for uid, nid in missing],
            )
        for uid, nid in stale:
            self.session.execute(
                delete(user_notification_table).where(
                    and_(
                        user_notification_table.c.user_id == uid,
                        user_notification_table.c.notification_id == nid,
                    )
                )
            )
        if missing or stale:
            commit(self.session, action="reconcile recipient back-references")
        return len(missing), len(stale)

    @staticmethod
    def _addressed_to(user_id: int):
        return select(notification_recipient_table.c.notification_id).where(
            notification_recipient_table.c.user_id == user_id
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            message=model.message,
            recipient_ids=[user.id for user in model.recipients],
            is_read=model.is_read,
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["NotificationRepository"]
