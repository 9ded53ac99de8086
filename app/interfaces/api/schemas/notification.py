"""Pydantic models describing broadcast notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BroadcastFeedItemRead(BaseModel):
    """Broadcast notification as delivered to a reader."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str | None = None
    body: str
    created_at: datetime | None = None
    is_read: bool = False


class UnreadCountRead(BaseModel):
    unread_count: int = Field(..., ge=0)


class MarkAllReadResult(BaseModel):
    processed: int = Field(..., ge=0, description="Number of items marked as read")


__all__ = ["BroadcastFeedItemRead", "MarkAllReadResult", "UnreadCountRead"]
