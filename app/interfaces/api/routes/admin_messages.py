"""Administrator endpoints for sending and auditing messages."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.messages import (
    delete_message,
    list_message_history,
    send_message,
)
from app.application.use_cases.notifications import delete_broadcast
from app.domain.entities import Identity
from app.domain.exceptions import MessagingError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import require_admin
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    MessageCreate,
    MessageHistoryPageRead,
    SentMessageRead,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/messages",
    response_model=ApiResponse[SentMessageRead],
    status_code=status.HTTP_201_CREATED,
)
def create_message(
    payload: MessageCreate,
    db: Session = Depends(get_db),
    admin: Identity = Depends(require_admin),
):
    """Send a broadcast or individual message to organizers."""

    try:
        sent = send_message(
            db,
            body=payload.body,
            message_type=payload.type,
            recipient_ids=payload.recipient_ids,
            title=payload.title,
            sender=admin,
        )
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Message sent", data=SentMessageRead.model_validate(sent))


@router.get("/messages", response_model=ApiResponse[MessageHistoryPageRead])
def read_message_history(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    _: Identity = Depends(require_admin),
):
    """Return every message, newest first, with delivery statistics."""

    try:
        history = list_message_history(db, page=page, limit=limit)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(data=MessageHistoryPageRead.model_validate(history))


@router.delete("/messages/{message_id}", response_model=ApiResponse[None])
def remove_message(
    message_id: str,
    db: Session = Depends(get_db),
    _: Identity = Depends(require_admin),
):
    try:
        delete_message(db, message_id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Message deleted")


@router.delete("/notifications/{notification_id}", response_model=ApiResponse[None])
def remove_broadcast(
    notification_id: str,
    db: Session = Depends(get_db),
    _: Identity = Depends(require_admin),
):
    try:
        delete_broadcast(db, notification_id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Notification deleted")
