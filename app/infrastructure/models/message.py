"""SQLAlchemy models for messages and their embedded recipients."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import DOCUMENT_ID_LENGTH, Base, generate_document_id
from app.utils import now_in_app_naive_datetime


class MessageModel(Base):
    """Database representation for admin messages."""

    __tablename__ = "message"

    id = Column(String(DOCUMENT_ID_LENGTH), primary_key=True, default=generate_document_id)
    type = Column(String(20), nullable=False, index=True)
    title = Column(String(120), nullable=True)
    body = Column(Text, nullable=False)
    created_by_identity = Column(String(128), nullable=True)
    created_by_email = Column(String(120), nullable=True)
    metadata_json = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )

    recipients = relationship(
        "MessageRecipientModel",
        back_populates="message",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="MessageRecipientModel.position",
    )


class MessageRecipientModel(Base):
    """Per-organizer read state owned by a message."""

    __tablename__ = "message_recipient"
    __table_args__ = (
        Index("ix_message_recipient_organizer_read", "organizer_id", "read"),
    )

    message_id = Column(
        String(DOCUMENT_ID_LENGTH),
        ForeignKey("message.id", ondelete="CASCADE"),
        primary_key=True,
    )
    organizer_id = Column(String(DOCUMENT_ID_LENGTH), primary_key=True)
    position = Column(Integer, nullable=False, default=0)
    read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    read_at = Column(DateTime(), nullable=True)

    message = relationship("MessageModel", back_populates="recipients")


__all__ = ["MessageModel", "MessageRecipientModel"]
