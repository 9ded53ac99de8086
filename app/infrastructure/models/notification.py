"""SQLAlchemy models for broadcast notifications and read receipts."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint

from app.infrastructure.database import DOCUMENT_ID_LENGTH, Base, generate_document_id
from app.utils import now_in_app_naive_datetime


class BroadcastNotificationModel(Base):
    """Database representation for broadcast notifications."""

    __tablename__ = "broadcast_notification"

    id = Column(String(DOCUMENT_ID_LENGTH), primary_key=True, default=generate_document_id)
    title = Column(String(120), nullable=True)
    body = Column(Text, nullable=False)
    created_by_identity = Column(String(128), nullable=True)
    created_by_email = Column(String(120), nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )


class NotificationReceiptModel(Base):
    """Read marker for one (notification, user) pair."""

    __tablename__ = "notification_receipt"
    __table_args__ = (
        UniqueConstraint(
            "notification_id", "user_id", name="uq_notification_receipt_user"
        ),
    )

    id = Column(String(DOCUMENT_ID_LENGTH), primary_key=True, default=generate_document_id)
    notification_id = Column(
        String(DOCUMENT_ID_LENGTH),
        ForeignKey("broadcast_notification.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(String(128), nullable=False, index=True)
    read_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["BroadcastNotificationModel", "NotificationReceiptModel"]
