"""Use case moving a support request through its triage states."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import SUPPORT_STATUSES, SupportRequest
from app.domain.exceptions import MessageValidationError, NotFoundError
from app.infrastructure.repositories import SupportRequestRepository
from app.utils import is_document_id, normalize_document_id

logger = logging.getLogger(__name__)


def update_support_request_status(
    session: Session, *, request_id: str, status: str | None
) -> SupportRequest:
    if status not in SUPPORT_STATUSES:
        raise MessageValidationError(
            f"Status must be one of: {', '.join(SUPPORT_STATUSES)}",
            details={"field": "status", "allowed": list(SUPPORT_STATUSES)},
        )
    if not is_document_id(request_id):
        raise NotFoundError("Support request", request_id)

    updated = SupportRequestRepository(session).update_status(
        normalize_document_id(request_id), status
    )
    if updated is None:
        raise NotFoundError("Support request", request_id)
    logger.info("Support request %s moved to %s", updated.id, status)
    return updated


__all__ = ["update_support_request_status"]
