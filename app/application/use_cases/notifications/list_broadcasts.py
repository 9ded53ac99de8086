"""Use case for reading the broadcast feed."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import BroadcastFeedItem
from app.infrastructure.repositories import (
    BroadcastNotificationRepository,
    NotificationReceiptRepository,
)

FEED_MAX_LIMIT = 100


def normalize_feed_limit(limit: int | None) -> int:
    """Clamp ``limit`` to ``1..100`` falling back to the configured default."""

    if limit is None or limit < 1:
        return get_settings().broadcast_feed_default_limit
    return min(limit, FEED_MAX_LIMIT)


def list_broadcasts(
    session: Session, *, user_id: str | None = None, limit: int | None = None
) -> list[BroadcastFeedItem]:
    """Return the newest broadcasts with the reader's read flag.

    Anonymous readers always see ``is_read=False``.
    """

    notifications = BroadcastNotificationRepository(session).list_recent(
        limit=normalize_feed_limit(limit)
    )
    read_ids: set[str] = set()
    if user_id and notifications:
        read_ids = NotificationReceiptRepository(session).read_notification_ids(
            user_id, [notification.id for notification in notifications]
        )
    return [
        BroadcastFeedItem(
            id=notification.id,
            title=notification.title,
            body=notification.body,
            created_at=notification.created_at,
            is_read=notification.id in read_ids,
        )
        for notification in notifications
    ]


__all__ = ["FEED_MAX_LIMIT", "list_broadcasts", "normalize_feed_limit"]
