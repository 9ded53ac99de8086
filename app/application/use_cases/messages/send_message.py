"""Use case for sending admin messages to organizers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import (
    BROADCAST_BODY_MAX_LENGTH,
    MESSAGE_BODY_MAX_LENGTH,
    MESSAGE_TITLE_MAX_LENGTH,
    MESSAGE_TYPE_BROADCAST,
    BroadcastNotification,
    Creator,
    Identity,
    Message,
    MessageRecipient,
    SentMessage,
)
from app.domain.exceptions import StoreError
from app.infrastructure.repositories import (
    BroadcastNotificationRepository,
    MessageRepository,
)
from app.utils import now_in_app_timezone

from .delivery import build_delivery_target, resolve_recipients
from .validators import clean_text

logger = logging.getLogger(__name__)


def send_message(
    session: Session,
    *,
    body: str,
    message_type: str | None,
    recipient_ids: Sequence[object] | None = None,
    title: str | None = None,
    sender: Identity | None = None,
) -> SentMessage:
    """Persist a message and, for broadcasts, the matching feed entry.

    The message and the broadcast copy are committed separately. When the
    second write fails the message is kept and :class:`StoreError` is raised.
    """

    is_broadcast = message_type == MESSAGE_TYPE_BROADCAST
    body_text = clean_text(
        body,
        field="body",
        max_length=BROADCAST_BODY_MAX_LENGTH if is_broadcast else MESSAGE_BODY_MAX_LENGTH,
        required=True,
    )
    title_text = clean_text(
        title, field="title", max_length=MESSAGE_TITLE_MAX_LENGTH, required=False
    )
    target = build_delivery_target(message_type, recipient_ids)

    organizer_ids = resolve_recipients(session, target)
    created_by = Creator.from_identity(sender)
    created_at = now_in_app_timezone()

    message = MessageRepository(session).create(
        Message(
            id=None,
            type=target.message_type,
            title=title_text,
            body=body_text,
            recipients=[MessageRecipient(organizer_id=oid) for oid in organizer_ids],
            created_by=created_by,
            created_at=created_at,
        )
    )
    logger.info(
        "Message %s sent as %s to %d organizer(s)",
        message.id,
        message.type,
        message.recipients_count,
    )

    if is_broadcast:
        try:
            BroadcastNotificationRepository(session).create(
                BroadcastNotification(
                    id=None,
                    title=title_text,
                    body=body_text,
                    created_by=created_by,
                    created_at=created_at,
                )
            )
        except StoreError:
            logger.warning(
                "Broadcast feed entry for message %s was not stored", message.id
            )
            raise

    return SentMessage(
        id=message.id,
        type=message.type,
        created_at=message.created_at,
        recipients_count=message.recipients_count,
    )


__all__ = ["send_message"]
