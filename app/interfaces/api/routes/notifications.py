"""Endpoints exposing the broadcast notification feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_broadcasts,
    list_broadcasts,
    mark_all_broadcasts_read,
    mark_broadcast_read,
)
from app.domain.entities import Identity
from app.domain.exceptions import MessagingError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity, get_optional_identity
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    BroadcastFeedItemRead,
    MarkAllReadResult,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/broadcast", response_model=ApiResponse[list[BroadcastFeedItemRead]])
def read_broadcast_feed(
    limit: int | None = Query(None, description="Maximum number of items, capped at 100"),
    db: Session = Depends(get_db),
    identity: Identity | None = Depends(get_optional_identity),
):
    """Return the newest broadcasts; read flags require authentication."""

    try:
        items = list_broadcasts(
            db, user_id=identity.id if identity else None, limit=limit
        )
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(data=[BroadcastFeedItemRead.model_validate(item) for item in items])


@router.get("/unread-count", response_model=ApiResponse[UnreadCountRead])
def read_unread_count(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Return how many broadcasts the caller has not read yet."""

    try:
        unread = count_unread_broadcasts(db, user_id=identity.id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(data=UnreadCountRead(unread_count=unread))


@router.post("/read-all", response_model=ApiResponse[MarkAllReadResult])
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        processed = mark_all_broadcasts_read(db, user_id=identity.id)
    except MessagingError as exc:
        raise_http_error(exc)
    message = (
        "All notifications marked as read" if processed else "No notifications to mark as read"
    )
    return ApiResponse(message=message, data=MarkAllReadResult(processed=processed))


@router.post("/{notification_id}/read", response_model=ApiResponse[None])
def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    try:
        mark_broadcast_read(db, notification_id=notification_id, user_id=identity.id)
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(message="Notification marked as read")
