"""Pydantic models describing admin and organizer message payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    """Payload used by administrators to send a message."""

    body: str = Field(..., description="Message content")
    type: str = Field(
        default="individual",
        description="``broadcast`` for every active organizer, anything else is individual",
    )
    recipient_ids: list[Any] | None = Field(
        default=None,
        description="Organizer identifiers for individual messages",
    )
    title: str | None = Field(default=None, description="Optional short title")


class SentMessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    created_at: datetime | None = None
    recipients_count: int


class OrganizerMessageRead(BaseModel):
    """Message as seen in an organizer inbox."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    title: str | None = None
    body: str
    created_at: datetime | None = None
    read: bool = False
    read_at: datetime | None = None


class MessageReadStateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    read: bool
    read_at: datetime | None = None


class CreatorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    identity: str | None = None
    email: str | None = None


class MessageHistoryItemRead(BaseModel):
    """Message summary for the admin history view."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    title: str | None = None
    body: str
    created_by: CreatorRead
    created_at: datetime | None = None
    recipients_count: int
    read_count: int
    metadata: dict[str, Any] = Field(default_factory=dict)


class MessageHistoryPageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[MessageHistoryItemRead]
    total: int
    page: int
    limit: int
    pages: int


__all__ = [
    "CreatorRead",
    "MessageCreate",
    "MessageHistoryItemRead",
    "MessageHistoryPageRead",
    "MessageReadStateRead",
    "OrganizerMessageRead",
    "SentMessageRead",
]
