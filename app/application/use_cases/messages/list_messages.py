"""Use cases for reading messages."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import MessageHistoryPage, OrganizerMessage
from app.domain.exceptions import MessageValidationError
from app.infrastructure.repositories import MessageRepository

from .validators import require_organizer

HISTORY_MAX_LIMIT = 100


def list_messages_for_organizer(
    session: Session, *, identity_id: str
) -> list[OrganizerMessage]:
    """Return the organizer's inbox with only their own read state."""

    organizer = require_organizer(session, identity_id)
    messages = MessageRepository(session).list_for_organizer(
        organizer.id, limit=get_settings().organizer_inbox_limit
    )
    inbox: list[OrganizerMessage] = []
    for message in messages:
        recipient = message.recipient_for(organizer.id)
        inbox.append(
            OrganizerMessage(
                id=message.id,
                type=message.type,
                title=message.title,
                body=message.body,
                created_at=message.created_at,
                read=recipient.read if recipient else False,
                read_at=recipient.read_at if recipient else None,
            )
        )
    return inbox


def count_unread_messages(session: Session, *, identity_id: str) -> int:
    organizer = require_organizer(session, identity_id)
    return MessageRepository(session).count_unread_for_organizer(organizer.id)


def list_message_history(
    session: Session, *, page: int = 1, limit: int = 20
) -> MessageHistoryPage:
    """Return every message, newest first, for the admin history view."""

    if page < 1:
        raise MessageValidationError(
            "page must be greater than zero", details={"field": "page"}
        )
    if limit < 1 or limit > HISTORY_MAX_LIMIT:
        raise MessageValidationError(
            f"limit must be between 1 and {HISTORY_MAX_LIMIT}",
            details={"field": "limit"},
        )
    repository = MessageRepository(session)
    items = repository.list_history(skip=(page - 1) * limit, limit=limit)
    return MessageHistoryPage(
        items=list(items), total=repository.count(), page=page, limit=limit
    )


__all__ = [
    "count_unread_messages",
    "list_message_history",
    "list_messages_for_organizer",
]
