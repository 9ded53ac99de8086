"""Use case for deleting a message from the admin history."""

import logging

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import MessageRepository
from app.utils import is_document_id, normalize_document_id

logger = logging.getLogger(__name__)


def delete_message(session: Session, message_id: str) -> None:
    """Delete the message; broadcast feed entries are left untouched."""

    if not is_document_id(message_id):
        raise NotFoundError("Message", message_id)
    message_id = normalize_document_id(message_id)
    if not MessageRepository(session).delete(message_id):
        raise NotFoundError("Message", message_id)
    logger.info("Message %s deleted", message_id)
