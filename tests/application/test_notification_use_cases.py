"""Tests for notification delivery, read state and deletion use cases."""

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy import insert

from notify_api.application.use_cases.notifications import (
    create_notification,
    delete_notification,
    list_notifications,
    list_notifications_between,
    mark_all_read,
    mark_read,
    reconcile_back_references,
)
from notify_api.domain.entities import Notification
from notify_api.domain.exceptions import (
    Forbidden,
    InvalidInput,
    NotFound,
    PartialWrite,
    StoreFailure,
)
from notify_api.infrastructure.models import NotificationModel, user_notification_table
from notify_api.infrastructure.repositories import NotificationRepository, UserRepository
from notify_api.utils import now_utc


@pytest.fixture()
def people(make_user):
    return {
        "admin": make_user("root", is_admin=True),
        "alice": make_user("alice"),
        "bob": make_user("bob"),
        "carol": make_user("carol"),
    }


def _notification_ids_of(session, user) -> list[int]:
    session.expire_all()
    return UserRepository(session).get(user.id).notification_ids


@pytest.mark.parametrize(
    ("message", "recipients"),
    [("", None), ("   ", None), ("hi", [])],
)
def test_create_rejects_empty_message_or_recipients(
    session, people, claims_for, message, recipients
) -> None:
    recipient_ids = [people["alice"].id] if recipients is None else recipients

    with pytest.raises(InvalidInput):
        create_notification(
            session,
            message=message,
            recipient_ids=recipient_ids,
            actor=claims_for(people["admin"]),
        )

    assert session.query(NotificationModel).count() == 0


def test_create_is_admin_only(session, people, claims_for) -> None:
    with pytest.raises(Forbidden):
        create_notification(
            session,
            message="hi",
            recipient_ids=[people["bob"].id],
            actor=claims_for(people["alice"]),
        )

    assert session.query(NotificationModel).count() == 0


def test_create_rejects_unknown_recipients(session, people, claims_for) -> None:
    with pytest.raises(InvalidInput):
        create_notification(
            session,
            message="hi",
            recipient_ids=[people["alice"].id, 9999],
            actor=claims_for(people["admin"]),
        )

    assert session.query(NotificationModel).count() == 0


def test_create_delivers_to_every_recipient_only(session, people, claims_for) -> None:
    alice, bob, carol = people["alice"], people["bob"], people["carol"]

    notification = create_notification(
        session,
        message="hi",
        recipient_ids=[alice.id, bob.id, alice.id],
        actor=claims_for(people["admin"]),
    )

    assert notification.recipient_ids == [alice.id, bob.id]
    assert notification.is_read is False
    assert notification.created_at is not None
    assert [n.id for n in list_notifications(session, alice.id)] == [notification.id]
    assert [n.id for n in list_notifications(session, bob.id)] == [notification.id]
    assert list_notifications(session, carol.id) == []
    assert _notification_ids_of(session, alice) == [notification.id]
    assert _notification_ids_of(session, bob) == [notification.id]
    assert _notification_ids_of(session, carol) == []


def test_mark_read_is_shared_by_all_recipients(session, people, claims_for) -> None:
    alice, bob = people["alice"], people["bob"]
    notification = create_notification(
        session,
        message="hi",
        recipient_ids=[alice.id, bob.id],
        actor=claims_for(people["admin"]),
    )

    assert mark_read(session, [notification.id], user_id=alice.id) == 1

    session.expire_all()
    assert list_notifications(session, bob.id)[0].is_read is True
    # Idempotent: nothing left to change, no error.
    assert mark_read(session, [notification.id], user_id=alice.id) == 0
    assert list_notifications(session, alice.id)[0].is_read is True


def test_mark_read_skips_notifications_of_other_users(session, people, claims_for) -> None:
    notification = create_notification(
        session,
        message="for alice",
        recipient_ids=[people["alice"].id],
        actor=claims_for(people["admin"]),
    )

    assert mark_read(session, [notification.id, 9999], user_id=people["carol"].id) == 0

    session.expire_all()
    assert NotificationRepository(session).get(notification.id).is_read is False


def test_mark_read_requires_ids(session, people) -> None:
    with pytest.raises(InvalidInput):
        mark_read(session, [], user_id=people["alice"].id)


def test_mark_all_read(session, people, claims_for) -> None:
    alice, bob = people["alice"], people["bob"]
    actor = claims_for(people["admin"])
    create_notification(session, message="one", recipient_ids=[alice.id], actor=actor)
    create_notification(session, message="two", recipient_ids=[alice.id, bob.id], actor=actor)
    create_notification(session, message="three", recipient_ids=[bob.id], actor=actor)

    assert mark_all_read(session, user_id=alice.id) == 2
    assert mark_all_read(session, user_id=alice.id) == 0

    session.expire_all()
    read_flags = {n.message: n.is_read for n in list_notifications(session, bob.id)}
    assert read_flags == {"two": True, "three": False}


def test_mark_all_read_without_notifications_is_a_no_op(session, people) -> None:
    assert mark_all_read(session, user_id=people["alice"].id) == 0


def test_delete_removes_back_references(session, people, claims_for) -> None:
    alice, bob = people["alice"], people["bob"]
    notification = create_notification(
        session,
        message="hi",
        recipient_ids=[alice.id, bob.id],
        actor=claims_for(people["admin"]),
    )

    delete_notification(session, notification.id, actor=claims_for(alice))

    assert list_notifications(session, bob.id) == []
    assert _notification_ids_of(session, alice) == []
    assert _notification_ids_of(session, bob) == []
    with pytest.raises(NotFound):
        delete_notification(session, notification.id, actor=claims_for(alice))


def test_delete_requires_recipient_or_admin(session, people, claims_for) -> None:
    admin = people["admin"]
    notification = create_notification(
        session,
        message="hi",
        recipient_ids=[people["alice"].id],
        actor=claims_for(admin),
    )

    with pytest.raises(Forbidden):
        delete_notification(session, notification.id, actor=claims_for(people["carol"]))

    delete_notification(session, notification.id, actor=claims_for(admin))
    assert NotificationRepository(session).get(notification.id) is None


def test_deleted_notification_id_is_never_reused(session, people, claims_for) -> None:
    admin, alice = claims_for(people["admin"]), claims_for(people["alice"])
    first = create_notification(
        session, message="one", recipient_ids=[people["alice"].id], actor=admin
    )
    delete_notification(session, first.id, actor=alice)

    second = create_notification(
        session, message="two", recipient_ids=[people["alice"].id], actor=admin
    )

    assert second.id != first.id
    with pytest.raises(NotFound):
        delete_notification(session, first.id, actor=alice)
    assert [n.id for n in list_notifications(session, people["alice"].id)] == [second.id]


def test_list_orders_newest_first_on_request(session, people) -> None:
    alice = people["alice"]
    repository = NotificationRepository(session)
    now = now_utc()
    older = repository.create(
        Notification(id=None, message="older", recipient_ids=[alice.id], created_at=now)
    )
    newer = repository.create(
        Notification(
            id=None,
            message="newer",
            recipient_ids=[alice.id],
            created_at=now + timedelta(minutes=5),
        )
    )

    assert [n.id for n in list_notifications(session, alice.id)] == [older.id, newer.id]
    assert [n.id for n in list_notifications(session, alice.id, newest_first=True)] == [
        newer.id,
        older.id,
    ]


def test_list_between_filters_by_creation_time(session, people) -> None:
    alice, bob = people["alice"], people["bob"]
    repository = NotificationRepository(session)
    base = now_utc() - timedelta(days=10)
    for offset, message in [(0, "day0"), (3, "day3"), (6, "day6")]:
        repository.create(
            Notification(
                id=None,
                message=message,
                recipient_ids=[alice.id],
                created_at=base + timedelta(days=offset),
            )
        )
    repository.create(
        Notification(id=None, message="bob", recipient_ids=[bob.id], created_at=base)
    )

    found = list_notifications_between(
        session,
        alice.id,
        start=base + timedelta(days=1),
        end=base + timedelta(days=6),
    )
    assert [n.message for n in found] == ["day6", "day3"]

    found = list_notifications_between(session, alice.id, end=base + timedelta(days=1))
    assert [n.message for n in found] == ["day0"]

    found = list_notifications_between(session, alice.id)
    assert [n.message for n in found] == ["day6", "day3", "day0"]


def test_list_between_rejects_inverted_range(session, people) -> None:
    now = now_utc()

    with pytest.raises(InvalidInput):
        list_notifications_between(
            session, people["alice"].id, start=now, end=now - timedelta(days=1)
        )


def test_partial_write_is_reported_and_reconciled(
    session, people, claims_for, monkeypatch
) -> None:
    alice, bob = people["alice"], people["bob"]

    def _fail(self, notification_id, user_ids):
        raise StoreFailure("Could not update recipient back-references")

    monkeypatch.setattr(NotificationRepository, "add_back_references", _fail)

    with pytest.raises(PartialWrite) as excinfo:
        create_notification(
            session,
            message="hi",
            recipient_ids=[alice.id, bob.id],
            actor=claims_for(people["admin"]),
        )

    notification_id = excinfo.value.notification_id
    # The recipient list is authoritative and already visible.
    assert [n.id for n in list_notifications(session, alice.id)] == [notification_id]
    assert _notification_ids_of(session, alice) == []

    assert reconcile_back_references(session) == 2
    assert _notification_ids_of(session, alice) == [notification_id]
    assert _notification_ids_of(session, bob) == [notification_id]
    assert reconcile_back_references(session) == 0


def test_reconcile_removes_stale_back_references(session, people, claims_for) -> None:
    carol = people["carol"]
    notification = create_notification(
        session,
        message="hi",
        recipient_ids=[people["alice"].id],
        actor=claims_for(people["admin"]),
    )
    session.execute(
        insert(user_notification_table),
        [{"user_id": carol.id, "notification_id": notification.id}],
    )
    session.commit()

    assert reconcile_back_references(session, user_id=people["alice"].id) == 0
    assert reconcile_back_references(session, user_id=carol.id) == 1
    assert _notification_ids_of(session, carol) == []
