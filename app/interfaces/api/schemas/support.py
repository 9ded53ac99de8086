"""Pydantic models for support submissions and their triage."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .message import CreatorRead


class SupportRequestCreate(BaseModel):
    """Bug report or feature request submitted from the app."""

    title: str | None = Field(default=None, description="Short summary")
    description: str | None = Field(default=None, description="Full description")
    email: str | None = Field(default=None, description="Optional contact email")
    category: str | None = Field(default=None, description="Request category")
    app_version: str | None = Field(default=None, description="Client version")
    platform: str | None = Field(default=None, description="Client platform")


class SupportRequestRead(BaseModel):
    """Acknowledgement returned to the submitter."""

    id: str
    title: str
    category: str
    status: str
    submitted_at: datetime | None = None


class SupportRequestDetailRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    title: str
    description: str
    email: str | None = None
    category: str
    app_version: str | None = None
    platform: str | None = None
    status: str
    submitted_by: CreatorRead
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SupportRequestPageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[SupportRequestDetailRead]
    total: int
    page: int
    limit: int
    pages: int


class SupportRequestStatusUpdate(BaseModel):
    status: str | None = Field(
        default=None, description="pending, in-progress, resolved or closed"
    )


class SupportRequestStatusRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    status: str
    updated_at: datetime | None = None


__all__ = [
    "SupportRequestCreate",
    "SupportRequestDetailRead",
    "SupportRequestPageRead",
    "SupportRequestRead",
    "SupportRequestStatusRead",
    "SupportRequestStatusUpdate",
]
