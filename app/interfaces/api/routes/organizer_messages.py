"""Endpoints for organizers reading the messages addressed to them."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.messages import (
    count_unread_messages,
    list_messages_for_organizer,
    mark_all_messages_read,
    mark_message_read,
)
from app.domain.entities import Identity
from app.domain.exceptions import MessagingError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    MarkAllReadResult,
    MessageReadStateRead,
    OrganizerMessageRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/organizer", tags=["organizer-messages"])


@router.get("/messages", response_model=ApiResponse[list[OrganizerMessageRead]])
def read_inbox(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Return the caller's inbox, newest first."""

    try:
        inbox = list_messages_for_organizer(db, identity_id=identity.id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(data=[OrganizerMessageRead.model_validate(item) for item in inbox])


@router.get("/messages/unread-count", response_model=ApiResponse[UnreadCountRead])
def read_inbox_unread_count(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        unread = count_unread_messages(db, identity_id=identity.id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(data=UnreadCountRead(unread_count=unread))


@router.put("/messages/read-all", response_model=ApiResponse[MarkAllReadResult])
def mark_inbox_read(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        updated = mark_all_messages_read(db, identity_id=identity.id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(
        message="All messages marked as read", data=MarkAllReadResult(processed=updated)
    )


@router.put("/messages/{message_id}/read", response_model=ApiResponse[MessageReadStateRead])
def mark_inbox_message_read(
    message_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        state = mark_message_read(db, message_id=message_id, identity_id=identity.id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(
        message="Message marked as read", data=MessageReadStateRead.model_validate(state)
    )
