"""Persistence helpers for messages and their recipients."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Creator, Message, MessageRecipient
from app.infrastructure.models import MessageModel, MessageRecipientModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .store_errors import store_operation


class MessageRepository:
    """Provide CRUD operations for :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, message_id: str) -> Message | None:
        with store_operation(self.session, "load message"):
            model = self.session.get(MessageModel, message_id)
            return self._to_entity(model) if model else None

    def count(self) -> int:
        with store_operation(self.session, "count messages"):
            return self.session.query(func.count(MessageModel.id)).scalar() or 0

    def list_history(self, *, skip: int = 0, limit: int = 20) -> Sequence[Message]:
        with store_operation(self.session, "list message history"):
            query = (
                self.session.query(MessageModel)
                .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
                .offset(skip)
                .limit(limit)
            )
            return [self._to_entity(model) for model in query.all()]

    def list_for_organizer(
        self, organizer_id: str, *, limit: int | None = 200
    ) -> Sequence[Message]:
        with store_operation(self.session, "list organizer messages"):
            query = (
                self.session.query(MessageModel)
                .join(MessageRecipientModel, MessageRecipientModel.message_id == MessageModel.id)
                .filter(MessageRecipientModel.organizer_id == organizer_id)
                .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            )
            if limit is not None:
                query = query.limit(limit)
            return [self._to_entity(model) for model in query.all()]

    def count_unread_for_organizer(self, organizer_id: str) -> int:
        with store_operation(self.session, "count unread organizer messages"):
            return (
                self.session.query(func.count(MessageRecipientModel.message_id))
                .filter(MessageRecipientModel.organizer_id == organizer_id)
                .filter(MessageRecipientModel.read.is_(False))
                .scalar()
                or 0
            )

    def create(self, message: Message) -> Message:
        model = MessageModel(
            type=message.type,
            title=message.title,
            body=message.body,
            created_by_identity=message.created_by.identity,
            created_by_email=message.created_by.email,
            metadata_json=dict(message.metadata or {}),
            created_at=ensure_app_naive_datetime(
                message.created_at or now_in_app_timezone()
            ),
        )
        model.recipients = [
            MessageRecipientModel(
                organizer_id=recipient.organizer_id,
                position=position,
                read=recipient.read,
                read_at=ensure_app_naive_datetime(recipient.read_at),
            )
            for position, recipient in enumerate(message.recipients)
        ]
        with store_operation(self.session, "create message"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_recipient_read(
        self, message_id: str, organizer_id: str, *, read_at: datetime
    ) -> bool:
        """Flip the recipient entry to read; returns ``False`` if it already was."""

        with store_operation(self.session, "mark message read"):
            updated = (
                self.session.query(MessageRecipientModel)
                .filter(MessageRecipientModel.message_id == message_id)
                .filter(MessageRecipientModel.organizer_id == organizer_id)
                .filter(MessageRecipientModel.read.is_(False))
                .update(
                    {
                        MessageRecipientModel.read: True,
                        MessageRecipientModel.read_at: ensure_app_naive_datetime(read_at),
                    },
                    synchronize_session=False,
                )
            )
            self.session.commit()
        return updated > 0

    def mark_all_read_for_organizer(
        self, organizer_id: str, *, read_at: datetime
    ) -> int:
        with store_operation(self.session, "mark organizer messages read"):
            updated = (
                self.session.query(MessageRecipientModel)
                .filter(MessageRecipientModel.organizer_id == organizer_id)
                .filter(MessageRecipientModel.read.is_(False))
                .update(
                    {
                        MessageRecipientModel.read: True,
                        MessageRecipientModel.read_at: ensure_app_naive_datetime(read_at),
                    },
                    synchronize_session=False,
                )
            )
            self.session.commit()
        return updated

    def delete(self, message_id: str) -> bool:
        with store_operation(self.session, "delete message"):
            model = self.session.get(MessageModel, message_id)
            if model is None:
                return False
            self.session.delete(model)
            self.session.commit()
        return True

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            type=model.type,
            title=model.title,
            body=model.body,
            recipients=[
                MessageRecipient(
                    organizer_id=recipient.organizer_id,
                    read=bool(recipient.read),
                    read_at=ensure_app_timezone(recipient.read_at),
                )
                for recipient in model.recipients
            ],
            created_by=Creator(
                identity=model.created_by_identity, email=model.created_by_email
            ),
            metadata=dict(model.metadata_json or {}),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["MessageRepository"]
