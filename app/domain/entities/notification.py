"""Domain entities for broadcast notifications and their read receipts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .identity import Creator

BROADCAST_TITLE_MAX_LENGTH = 120
BROADCAST_BODY_MAX_LENGTH = 2000


@dataclass
class BroadcastNotification:
    """Message visible to every user of the platform."""

    id: str | None
    body: str
    title: str | None = None
    created_by: Creator = field(default_factory=Creator)
    created_at: datetime | None = None


@dataclass
class NotificationReceipt:
    """Marker recording that ``user_id`` has read a broadcast."""

    id: str | None
    notification_id: str
    user_id: str
    read_at: datetime | None = None


@dataclass(frozen=True)
class BroadcastFeedItem:
    """Broadcast projected for a particular reader."""

    id: str
    title: str | None
    body: str
    created_at: datetime | None
    is_read: bool


__all__ = [
    "BROADCAST_BODY_MAX_LENGTH",
    "BROADCAST_TITLE_MAX_LENGTH",
    "BroadcastFeedItem",
    "BroadcastNotification",
    "NotificationReceipt",
]
