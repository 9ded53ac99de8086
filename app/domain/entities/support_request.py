"""Domain entities for bug reports and feature requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .identity import Creator

SUPPORT_REQUEST_BUG = "bug"
SUPPORT_REQUEST_FEATURE = "feature"
SUPPORT_REQUEST_TYPES = (SUPPORT_REQUEST_BUG, SUPPORT_REQUEST_FEATURE)

SUPPORT_CATEGORIES = ("general", "crash", "ui", "performance", "feature")
DEFAULT_SUPPORT_CATEGORY = "general"

SUPPORT_STATUS_PENDING = "pending"
SUPPORT_STATUS_IN_PROGRESS = "in-progress"
SUPPORT_STATUS_RESOLVED = "resolved"
SUPPORT_STATUS_CLOSED = "closed"
SUPPORT_STATUSES = (
    SUPPORT_STATUS_PENDING,
    SUPPORT_STATUS_IN_PROGRESS,
    SUPPORT_STATUS_RESOLVED,
    SUPPORT_STATUS_CLOSED,
)

SUPPORT_TITLE_MAX_LENGTH = 120
SUPPORT_DESCRIPTION_MAX_LENGTH = 500


@dataclass
class SupportRequest:
    """Bug report or feature request awaiting triage by an administrator."""

    id: str | None
    type: str
    title: str
    description: str
    email: str | None = None
    category: str = DEFAULT_SUPPORT_CATEGORY
    app_version: str | None = None
    platform: str | None = None
    status: str = SUPPORT_STATUS_PENDING
    submitted_by: Creator = field(default_factory=Creator)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SupportRequestPage:
    items: list[SupportRequest]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        if self.limit <= 0:
            return 0
        return (self.total + self.limit - 1) // self.limit


__all__ = [
    "DEFAULT_SUPPORT_CATEGORY",
    "SUPPORT_CATEGORIES",
    "SUPPORT_DESCRIPTION_MAX_LENGTH",
    "SUPPORT_REQUEST_BUG",
    "SUPPORT_REQUEST_FEATURE",
    "SUPPORT_REQUEST_TYPES",
    "SUPPORT_STATUSES",
    "SUPPORT_STATUS_CLOSED",
    "SUPPORT_STATUS_IN_PROGRESS",
    "SUPPORT_STATUS_PENDING",
    "SUPPORT_STATUS_RESOLVED",
    "SUPPORT_TITLE_MAX_LENGTH",
    "SupportRequest",
    "SupportRequestPage",
]
