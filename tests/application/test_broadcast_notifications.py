"""Tests for the broadcast feed, receipts and unread counters."""

from __future__ import annotations

import random
from datetime import timedelta

import pytest

from app.application.use_cases.messages import send_message
from app.application.use_cases.notifications import (
    count_unread_broadcasts,
    delete_broadcast,
    list_broadcasts,
    mark_all_broadcasts_read,
    mark_broadcast_read,
    normalize_feed_limit,
)
from app.domain.entities import BroadcastNotification
from app.domain.exceptions import NotFoundError
from app.infrastructure.models import NotificationReceiptModel
from app.infrastructure.repositories import (
    BroadcastNotificationRepository,
    MessageRepository,
    NotificationReceiptRepository,
)
from app.utils import now_in_app_timezone

USER = "user-1"
OTHER_USER = "user-2"


def _receipt_rows(session, notification_id: str, user_id: str) -> int:
    return (
        session.query(NotificationReceiptModel)
        .filter_by(notification_id=notification_id, user_id=user_id)
        .count()
    )


def _broadcast(session, body: str, *, minutes_ago: int = 0) -> str:
    notification = BroadcastNotificationRepository(session).create(
        BroadcastNotification(
            id=None,
            body=body,
            created_at=now_in_app_timezone() - timedelta(minutes=minutes_ago),
        )
    )
    return notification.id


def test_maintenance_scenario(session):
    send_message(session, body="Maintenance at 10pm", message_type="broadcast")

    anonymous = list_broadcasts(session)
    assert len(anonymous) == 1
    assert anonymous[0].is_read is False

    mark_broadcast_read(session, notification_id=anonymous[0].id, user_id=USER)

    personal = list_broadcasts(session, user_id=USER)
    assert personal[0].is_read is True
    assert count_unread_broadcasts(session, user_id=USER) == 0
    assert list_broadcasts(session)[0].is_read is False
    assert list_broadcasts(session, user_id=OTHER_USER)[0].is_read is False


def test_marking_twice_keeps_a_single_receipt(session):
    notification_id = _broadcast(session, "Welcome")

    mark_broadcast_read(session, notification_id=notification_id, user_id=USER)
    first = NotificationReceiptRepository(session).read_notification_ids(
        USER, [notification_id]
    )
    mark_broadcast_read(session, notification_id=notification_id, user_id=USER)

    assert first == {notification_id}
    assert _receipt_rows(session, notification_id, USER) == 1
    assert NotificationReceiptRepository(session).count_read(USER) == 1


def test_marking_unknown_notification_fails(session):
    with pytest.raises(NotFoundError):
        mark_broadcast_read(
            session, notification_id="cccccccccccccccccccccccc", user_id=USER
        )
    with pytest.raises(NotFoundError):
        mark_broadcast_read(session, notification_id="bogus", user_id=USER)

    assert NotificationReceiptRepository(session).count_read(USER) == 0


def test_unread_count_is_zero_without_broadcasts(session):
    assert count_unread_broadcasts(session, user_id=USER) == 0


def test_unread_count_matches_distinct_reads_for_any_interleaving(session):
    rng = random.Random(7)
    sent: list[str] = []
    read: set[str] = set()

    for step in range(30):
        if not sent or rng.random() < 0.5:
            sent.append(_broadcast(session, f"Broadcast {step}"))
        else:
            target = rng.choice(sent)
            mark_broadcast_read(session, notification_id=target, user_id=USER)
            read.add(target)
        assert count_unread_broadcasts(session, user_id=USER) == len(sent) - len(read)

    assert count_unread_broadcasts(session, user_id=OTHER_USER) == len(sent)


def test_mark_all_read_covers_every_broadcast(session):
    first = _broadcast(session, "One", minutes_ago=2)
    _broadcast(session, "Two", minutes_ago=1)
    mark_broadcast_read(session, notification_id=first, user_id=USER)

    processed = mark_all_broadcasts_read(session, user_id=USER)

    assert processed == 2
    assert count_unread_broadcasts(session, user_id=USER) == 0
    assert all(item.is_read for item in list_broadcasts(session, user_id=USER))
    assert NotificationReceiptRepository(session).count_read(USER) == 2
    # Retrying is safe.
    assert mark_all_broadcasts_read(session, user_id=USER) == 2
    assert NotificationReceiptRepository(session).count_read(USER) == 2


def test_mark_all_read_without_broadcasts_is_a_no_op(session):
    assert mark_all_broadcasts_read(session, user_id=USER) == 0


def test_feed_is_newest_first_and_limited(session):
    oldest = _broadcast(session, "oldest", minutes_ago=3)
    middle = _broadcast(session, "middle", minutes_ago=2)
    newest = _broadcast(session, "newest", minutes_ago=1)

    assert [item.id for item in list_broadcasts(session)] == [newest, middle, oldest]
    assert [item.id for item in list_broadcasts(session, limit=2)] == [newest, middle]


@pytest.mark.parametrize(
    ("requested", "expected"), [(None, 30), (0, 30), (-5, 30), (10, 10), (500, 100)]
)
def test_feed_limit_is_clamped(requested, expected):
    assert normalize_feed_limit(requested) == expected


def test_first_read_time_is_preserved(session):
    notification_id = _broadcast(session, "Welcome")
    receipts = NotificationReceiptRepository(session)
    earlier = now_in_app_timezone() - timedelta(hours=1)

    receipts.upsert_read([notification_id], user_id=USER, read_at=earlier)
    receipts.upsert_read([notification_id], user_id=USER)

    assert _receipt_rows(session, notification_id, USER) == 1
    stored = receipts.get_for(notification_id=notification_id, user_id=USER)
    assert stored.read_at == earlier


def test_deleting_a_broadcast_removes_its_receipts(session):
    kept = _broadcast(session, "kept")
    removed = _broadcast(session, "removed")
    mark_all_broadcasts_read(session, user_id=USER)
    _broadcast(session, "fresh")

    delete_broadcast(session, removed)

    assert count_unread_broadcasts(session, user_id=USER) == 1
    assert NotificationReceiptRepository(session).count_read(USER) == 1
    assert {item.id for item in list_broadcasts(session)} >= {kept}
    with pytest.raises(NotFoundError):
        delete_broadcast(session, removed)


def test_deleting_a_broadcast_keeps_the_admin_message(session):
    send_message(session, body="Heads up", message_type="broadcast")
    feed_id = list_broadcasts(session)[0].id

    delete_broadcast(session, feed_id)

    assert list_broadcasts(session) == []
    assert MessageRepository(session).count() == 1
