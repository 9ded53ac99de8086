"""SQLAlchemy model for bug reports and feature requests."""

from sqlalchemy import Column, DateTime, Index, String

from app.infrastructure.database import DOCUMENT_ID_LENGTH, Base, generate_document_id
from app.utils import now_in_app_naive_datetime


class SupportRequestModel(Base):
    """Database representation of a support request."""

    __tablename__ = "support_request"
    __table_args__ = (
        Index("ix_support_request_type_created", "type", "created_at"),
        Index("ix_support_request_status_created", "status", "created_at"),
        Index("ix_support_request_category_created", "category", "created_at"),
    )

    id = Column(String(DOCUMENT_ID_LENGTH), primary_key=True, default=generate_document_id)
    type = Column(String(20), nullable=False)
    title = Column(String(120), nullable=False)
    description = Column(String(500), nullable=False)
    email = Column(String(120), nullable=True)
    category = Column(String(20), nullable=False, default="general")
    app_version = Column(String(20), nullable=True)
    platform = Column(String(20), nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    submitted_by_identity = Column(String(128), nullable=True)
    submitted_by_email = Column(String(120), nullable=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["SupportRequestModel"]
