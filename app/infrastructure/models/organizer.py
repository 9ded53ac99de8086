"""SQLAlchemy model for the organizer directory."""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import expression

from app.infrastructure.database import DOCUMENT_ID_LENGTH, Base, generate_document_id
from app.utils import now_in_app_naive_datetime


class OrganizerModel(Base):
    """Database representation of an event organizer."""

    __tablename__ = "organizer"

    id = Column(String(DOCUMENT_ID_LENGTH), primary_key=True, default=generate_document_id)
    identity_id = Column(String(128), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False, unique=True)
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
        index=True,
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["OrganizerModel"]
