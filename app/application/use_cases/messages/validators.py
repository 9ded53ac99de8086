"""Validation helpers shared by the message use cases."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Organizer
from app.domain.exceptions import MessageValidationError, NotFoundError
from app.infrastructure.repositories import OrganizerRepository


def clean_text(
    value: str | None, *, field: str, max_length: int, required: bool
) -> str | None:
    """Trim ``value`` and enforce presence and length constraints."""

    text = value.strip() if isinstance(value, str) else ""
    if not text:
        if required:
            raise MessageValidationError(f"{field} is required", details={"field": field})
        return None
    if len(text) > max_length:
        raise MessageValidationError(
            f"{field} must be at most {max_length} characters",
            details={"field": field, "max_length": max_length},
        )
    return text


def require_organizer(session: Session, identity_id: str) -> Organizer:
    """Return the organizer linked to ``identity_id`` or raise ``NotFoundError``."""

    organizer = OrganizerRepository(session).get_by_identity(identity_id)
    if organizer is None:
        raise NotFoundError("Organizer", identity_id)
    return organizer


__all__ = ["clean_text", "require_organizer"]
