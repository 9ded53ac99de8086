"""Use case for removing a broadcast from the user feed."""

import logging

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import BroadcastNotificationRepository
from app.utils import is_document_id, normalize_document_id

logger = logging.getLogger(__name__)


def delete_broadcast(session: Session, notification_id: str) -> None:
    """Delete the broadcast and its receipts so unread counts stay exact.

    Messages in the admin history are independent records and are kept.
    """

    if not is_document_id(notification_id):
        raise NotFoundError("Notification", notification_id)
    notification_id = normalize_document_id(notification_id)
    if not BroadcastNotificationRepository(session).delete(notification_id):
        raise NotFoundError("Notification", notification_id)
    logger.info("Broadcast notification %s deleted", notification_id)
