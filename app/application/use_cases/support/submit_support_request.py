"""Use case recording bug reports and feature requests."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.application.use_cases.messages.validators import clean_text
from app.domain.entities import (
    DEFAULT_SUPPORT_CATEGORY,
    MESSAGE_BODY_MAX_LENGTH,
    MESSAGE_TITLE_MAX_LENGTH,
    MESSAGE_TYPE_ADMIN,
    SUPPORT_CATEGORIES,
    SUPPORT_DESCRIPTION_MAX_LENGTH,
    SUPPORT_REQUEST_BUG,
    SUPPORT_REQUEST_FEATURE,
    SUPPORT_TITLE_MAX_LENGTH,
    Creator,
    Identity,
    Message,
    SupportRequest,
)
from app.domain.exceptions import MessageValidationError
from app.infrastructure.repositories import MessageRepository, SupportRequestRepository

logger = logging.getLogger(__name__)

_TITLE_PREFIXES = {
    SUPPORT_REQUEST_BUG: "Bug Report",
    SUPPORT_REQUEST_FEATURE: "Feature Request",
}
_FIELD_LABELS = {
    SUPPORT_REQUEST_BUG: "Bug",
    SUPPORT_REQUEST_FEATURE: "Feature request",
}


def normalize_category(category: str | None) -> str:
    if isinstance(category, str) and category.strip().lower() in SUPPORT_CATEGORIES:
        return category.strip().lower()
    return DEFAULT_SUPPORT_CATEGORY


def submit_support_request(
    session: Session,
    *,
    request_type: str,
    title: str | None,
    description: str | None,
    email: str | None = None,
    category: str | None = None,
    app_version: str | None = None,
    platform: str | None = None,
    submitter: Identity | None = None,
) -> SupportRequest:
    """Store the request and post a copy to the admin message history.

    The history copy is an ``admin`` message with no recipients whose
    metadata points back at the stored request.
    """

    if request_type not in _TITLE_PREFIXES:
        raise MessageValidationError(
            "Unknown support request type", details={"field": "request_type"}
        )
    label = _FIELD_LABELS[request_type]
    title_text = clean_text(
        title, field=f"{label} title", max_length=SUPPORT_TITLE_MAX_LENGTH, required=True
    )
    description_text = clean_text(
        description,
        field=f"{label} description",
        max_length=SUPPORT_DESCRIPTION_MAX_LENGTH,
        required=True,
    )
    contact_email = email.strip().lower() if isinstance(email, str) and email.strip() else None
    submitted_by = Creator.from_identity(submitter)

    request = SupportRequestRepository(session).create(
        SupportRequest(
            id=None,
            type=request_type,
            title=title_text,
            description=description_text,
            email=contact_email,
            category=normalize_category(category),
            app_version=clean_text(
                app_version, field="app_version", max_length=20, required=False
            ),
            platform=clean_text(platform, field="platform", max_length=20, required=False),
            submitted_by=submitted_by,
        )
    )

    body = "\n".join(
        [
            f"Category: {request.category.capitalize()}",
            f"Submitted: {request.created_at.date().isoformat()}",
            "",
            f"Email: {contact_email or 'Not provided'}",
            f"User: {submitted_by.email or 'Anonymous user'}",
            "",
            "Description:",
            description_text,
        ]
    )
    message = MessageRepository(session).create(
        Message(
            id=None,
            type=MESSAGE_TYPE_ADMIN,
            title=f"{_TITLE_PREFIXES[request_type]}: {title_text}"[:MESSAGE_TITLE_MAX_LENGTH],
            body=body[:MESSAGE_BODY_MAX_LENGTH],
            recipients=[],
            created_by=submitted_by,
            metadata={
                "support_request_id": request.id,
                "request_type": request_type,
                "category": request.category,
                "submitted_by": contact_email or "Anonymous",
            },
            created_at=request.created_at,
        )
    )
    logger.info(
        "Stored %s support request %s with history message %s",
        request_type,
        request.id,
        message.id,
    )
    return request


__all__ = ["normalize_category", "submit_support_request"]
