"""Use case computing the unread broadcast counter."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import (
    BroadcastNotificationRepository,
    NotificationReceiptRepository,
)


def count_unread_broadcasts(session: Session, *, user_id: str) -> int:
    """Return ``total broadcasts - broadcasts read by user_id``."""

    total = BroadcastNotificationRepository(session).count()
    if total == 0:
        return 0
    read_count = NotificationReceiptRepository(session).count_read(user_id)
    return max(0, total - read_count)
