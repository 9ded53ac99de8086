"""Domain entities for admin messages and their recipients."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .identity import Creator

MESSAGE_TYPE_BROADCAST = "broadcast"
MESSAGE_TYPE_INDIVIDUAL = "individual"
MESSAGE_TYPE_ADMIN = "admin"
MESSAGE_TYPES = (MESSAGE_TYPE_BROADCAST, MESSAGE_TYPE_INDIVIDUAL, MESSAGE_TYPE_ADMIN)

MESSAGE_TITLE_MAX_LENGTH = 120
MESSAGE_BODY_MAX_LENGTH = 5000


@dataclass
class MessageRecipient:
    """Read state of a message for one organizer.

    ``read`` and ``read_at`` only move forward: once a recipient has read a
    message the flag is never cleared.
    """

    organizer_id: str
    read: bool = False
    read_at: datetime | None = None


@dataclass
class Message:
    """Message authored by an administrator or generated by the system."""

    id: str | None
    type: str
    body: str
    title: str | None = None
    recipients: list[MessageRecipient] = field(default_factory=list)
    created_by: Creator = field(default_factory=Creator)
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None

    def recipient_for(self, organizer_id: str) -> MessageRecipient | None:
        """Return the entry addressed to ``organizer_id`` if there is one."""

        for recipient in self.recipients:
            if recipient.organizer_id == organizer_id:
                return recipient
        return None

    @property
    def recipients_count(self) -> int:
        return len(self.recipients)

    @property
    def read_count(self) -> int:
        return sum(1 for recipient in self.recipients if recipient.read)


@dataclass(frozen=True)
class SentMessage:
    """Summary returned after a message has been delivered."""

    id: str
    type: str
    created_at: datetime | None
    recipients_count: int


@dataclass(frozen=True)
class OrganizerMessage:
    """Message as presented in one organizer's inbox."""

    id: str
    type: str
    title: str | None
    body: str
    created_at: datetime | None
    read: bool
    read_at: datetime | None


@dataclass(frozen=True)
class MessageReadState:
    """Result of marking a message read for an organizer."""

    id: str
    read: bool
    read_at: datetime | None


@dataclass(frozen=True)
class MessageHistoryPage:
    """Page of the admin message history."""

    items: list[Message]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        if self.limit <= 0:
            return 0
        return (self.total + self.limit - 1) // self.limit


__all__ = [
    "MESSAGE_BODY_MAX_LENGTH",
    "MESSAGE_TITLE_MAX_LENGTH",
    "MESSAGE_TYPES",
    "MESSAGE_TYPE_ADMIN",
    "MESSAGE_TYPE_BROADCAST",
    "MESSAGE_TYPE_INDIVIDUAL",
    "Message",
    "MessageHistoryPage",
    "MessageReadState",
    "MessageRecipient",
    "OrganizerMessage",
    "SentMessage",
]
