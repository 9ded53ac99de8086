"""Use cases for tracking which organizers read a message."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import MessageReadState
from app.domain.exceptions import (
    ForbiddenError,
    MessageValidationError,
    NotFoundError,
)
from app.infrastructure.repositories import MessageRepository
from app.utils import is_document_id, normalize_document_id, now_in_app_timezone

from .validators import require_organizer

logger = logging.getLogger(__name__)


def mark_message_read(
    session: Session, *, message_id: str, identity_id: str
) -> MessageReadState:
    """Mark ``message_id`` read for the organizer behind ``identity_id``."""

    if not is_document_id(message_id):
        raise MessageValidationError("Invalid message id", details={"field": "message_id"})
    message_id = normalize_document_id(message_id)

    organizer = require_organizer(session, identity_id)
    repository = MessageRepository(session)
    message = repository.get(message_id)
    if message is None:
        raise NotFoundError("Message", message_id)

    recipient = message.recipient_for(organizer.id)
    if recipient is None:
        raise ForbiddenError(
            "Message does not belong to this organizer",
            details={"message_id": message_id},
        )
    if recipient.read:
        return MessageReadState(id=message_id, read=True, read_at=recipient.read_at)

    read_at = now_in_app_timezone()
    if not repository.mark_recipient_read(message_id, organizer.id, read_at=read_at):
        # A concurrent request got there first; report the stored timestamp.
        current = repository.get(message_id)
        stored = current.recipient_for(organizer.id) if current else None
        if stored is not None:
            read_at = stored.read_at
    return MessageReadState(id=message_id, read=True, read_at=read_at)


def mark_all_messages_read(session: Session, *, identity_id: str) -> int:
    """Mark every unread message in the organizer's inbox as read."""

    organizer = require_organizer(session, identity_id)
    updated = MessageRepository(session).mark_all_read_for_organizer(
        organizer.id, read_at=now_in_app_timezone()
    )
    logger.info("Marked %d message(s) read for organizer %s", updated, organizer.id)
    return updated


__all__ = ["mark_all_messages_read", "mark_message_read"]
