"""Use case listing support requests for administrators."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import (
    SUPPORT_CATEGORIES,
    SUPPORT_REQUEST_TYPES,
    SUPPORT_STATUSES,
    SupportRequestPage,
)
from app.infrastructure.repositories import SupportRequestRepository

SUPPORT_LIST_DEFAULT_LIMIT = 20
SUPPORT_LIST_MAX_LIMIT = 100


def _known(value: str | None, allowed: tuple[str, ...]) -> str | None:
    if isinstance(value, str) and value.strip().lower() in allowed:
        return value.strip().lower()
    return None


def list_support_requests(
    session: Session,
    *,
    page: int | None = 1,
    limit: int | None = SUPPORT_LIST_DEFAULT_LIMIT,
    request_type: str | None = None,
    status: str | None = None,
    category: str | None = None,
) -> SupportRequestPage:
    """Return support requests, newest first.

    Filters with unknown values are ignored rather than rejected. ``limit``
    falls back to 20 when missing or not positive and is capped at 100, and
    ``page`` is raised to at least 1.
    """

    safe_limit = limit if limit and limit > 0 else SUPPORT_LIST_DEFAULT_LIMIT
    safe_limit = min(safe_limit, SUPPORT_LIST_MAX_LIMIT)
    safe_page = max(page or 1, 1)
    filters = {
        "request_type": _known(request_type, SUPPORT_REQUEST_TYPES),
        "status": _known(status, SUPPORT_STATUSES),
        "category": _known(category, SUPPORT_CATEGORIES),
    }

    repository = SupportRequestRepository(session)
    items = repository.list_filtered(
        skip=(safe_page - 1) * safe_limit, limit=safe_limit, **filters
    )
    return SupportRequestPage(
        items=list(items),
        total=repository.count(**filters),
        page=safe_page,
        limit=safe_limit,
    )


__all__ = [
    "SUPPORT_LIST_DEFAULT_LIMIT",
    "SUPPORT_LIST_MAX_LIMIT",
    "list_support_requests",
]
