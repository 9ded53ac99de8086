"""Use cases for recording that a user read broadcast notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import (
    BroadcastNotificationRepository,
    NotificationReceiptRepository,
)
from app.utils import is_document_id, normalize_document_id, now_in_app_timezone


logger = logging.getLogger(__name__)


def mark_broadcast_read(session: Session, *, notification_id: str, user_id: str) -> None:
    """Record a receipt for ``notification_id``; repeated calls are no-ops."""

    if not is_document_id(notification_id):
        raise NotFoundError("Notification", notification_id)
    notification_id = normalize_document_id(notification_id)
    if not BroadcastNotificationRepository(session).exists(notification_id):
        raise NotFoundError("Notification", notification_id)
    NotificationReceiptRepository(session).upsert_read(
        [notification_id], user_id=user_id, read_at=now_in_app_timezone()
    )


def mark_all_broadcasts_read(session: Session, *, user_id: str) -> int:
    """Upsert a receipt for every broadcast; returns how many were processed."""

    notification_ids = BroadcastNotificationRepository(session).list_ids()
    if not notification_ids:
        return 0
    processed = NotificationReceiptRepository(session).upsert_read(
        notification_ids, user_id=user_id, read_at=now_in_app_timezone()
    )
    logger.info("Marked %d broadcast(s) read for user %s", processed, user_id)
    return processed


__all__ = ["mark_all_broadcasts_read", "mark_broadcast_read"]
