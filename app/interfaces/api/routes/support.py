"""Endpoints for bug reports, feature requests and their triage."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.application.use_cases.support import (
    list_support_requests,
    submit_support_request,
    update_support_request_status,
)
from app.domain.entities import SUPPORT_REQUEST_BUG, SUPPORT_REQUEST_FEATURE, Identity
from app.domain.exceptions import MessagingError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_optional_identity, require_admin
from app.interfaces.api.routes_helpers import raise_http_error
from app.interfaces.api.schemas import (
    ApiResponse,
    SupportRequestCreate,
    SupportRequestPageRead,
    SupportRequestRead,
    SupportRequestStatusRead,
    SupportRequestStatusUpdate,
)

router = APIRouter(prefix="/support", tags=["support"])


def _submit(
    request_type: str,
    payload: SupportRequestCreate,
    db: Session,
    identity: Identity | None,
) -> SupportRequestRead:
    try:
        request = submit_support_request(
            db,
            request_type=request_type,
            title=payload.title,
            description=payload.description,
            email=payload.email,
            category=payload.category,
            app_version=payload.app_version,
            platform=payload.platform,
            submitter=identity,
        )
    except MessagingError as exc:
        raise_http_error(exc)
    return SupportRequestRead(
        id=request.id,
        title=request.title,
        category=request.category,
        status=request.status,
        submitted_at=request.created_at,
    )


@router.post("/bug-report", response_model=ApiResponse[SupportRequestRead])
def submit_bug_report(
    payload: SupportRequestCreate,
    db: Session = Depends(get_db),
    identity: Identity | None = Depends(get_optional_identity),
):
    """Record a bug report and forward it to the admin message history."""

    data = _submit(SUPPORT_REQUEST_BUG, payload, db, identity)
    return ApiResponse(message="Bug report submitted successfully", data=data)


@router.post("/feature-request", response_model=ApiResponse[SupportRequestRead])
def submit_feature_request(
    payload: SupportRequestCreate,
    db: Session = Depends(get_db),
    identity: Identity | None = Depends(get_optional_identity),
):
    """Record a feature request and forward it to the admin message history."""

    data = _submit(SUPPORT_REQUEST_FEATURE, payload, db, identity)
    return ApiResponse(message="Feature request submitted successfully", data=data)


@router.get("/requests", response_model=ApiResponse[SupportRequestPageRead])
def read_support_requests(
    page: int = Query(1),
    limit: int = Query(20),
    request_type: str | None = Query(None, alias="type"),
    status_filter: str | None = Query(None, alias="status"),
    category: str | None = Query(None),
    db: Session = Depends(get_db),
    _: Identity = Depends(require_admin),
):
    """List support requests, newest first, optionally filtered."""

    try:
        result = list_support_requests(
            db,
            page=page,
            limit=limit,
            request_type=request_type,
            status=status_filter,
            category=category,
        )
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(data=SupportRequestPageRead.model_validate(result))


@router.put(
    "/requests/{request_id}/status",
    response_model=ApiResponse[SupportRequestStatusRead],
)
def change_support_request_status(
    request_id: str,
    payload: SupportRequestStatusUpdate,
    db: Session = Depends(get_db),
    _: Identity = Depends(require_admin),
):
    try:
        updated = update_support_request_status(
            db, request_id=request_id, status=payload.status
        )
    except MessagingError as exc:
        raise_http_error(exc)
    return ApiResponse(
        message="Support request status updated successfully",
        data=SupportRequestStatusRead.model_validate(updated),
    )
