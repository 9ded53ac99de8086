"""Persistence helpers for support requests."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.domain.entities import Creator, SupportRequest
from app.infrastructure.models import SupportRequestModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .store_errors import store_operation


class SupportRequestRepository:
    """Provide CRUD operations for :class:`SupportRequest` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, request_id: str) -> SupportRequest | None:
        with store_operation(self.session, "load support request"):
            model = self.session.get(SupportRequestModel, request_id)
        return self._to_entity(model) if model else None

    def list_filtered(
        self,
        *,
        request_type: str | None = None,
        status: str | None = None,
        category: str | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Sequence[SupportRequest]:
        with store_operation(self.session, "list support requests"):
            query = (
                self._filtered(request_type=request_type, status=status, category=category)
                .order_by(SupportRequestModel.created_at.desc(), SupportRequestModel.id.desc())
                .offset(skip)
                .limit(limit)
            )
            models = query.all()
        return [self._to_entity(model) for model in models]

    def count(
        self,
        *,
        request_type: str | None = None,
        status: str | None = None,
        category: str | None = None,
    ) -> int:
        with store_operation(self.session, "count support requests"):
            query = self._filtered(
                request_type=request_type, status=status, category=category
            )
            return query.with_entities(func.count(SupportRequestModel.id)).scalar() or 0

    def create(self, request: SupportRequest) -> SupportRequest:
        created_at = ensure_app_naive_datetime(request.created_at or now_in_app_timezone())
        model = SupportRequestModel(
            type=request.type,
            title=request.title,
            description=request.description,
            email=request.email,
            category=request.category,
            app_version=request.app_version,
            platform=request.platform,
            status=request.status,
            submitted_by_identity=request.submitted_by.identity,
            submitted_by_email=request.submitted_by.email,
            created_at=created_at,
            updated_at=created_at,
        )
        with store_operation(self.session, "create support request"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, request_id: str, status: str) -> SupportRequest | None:
        with store_operation(self.session, "update support request status"):
            model = self.session.get(SupportRequestModel, request_id)
            if model is None:
                return None
            model.status = status
            model.updated_at = ensure_app_naive_datetime(now_in_app_timezone())
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def _filtered(
        self,
        *,
        request_type: str | None,
        status: str | None,
        category: str | None,
    ) -> Query:
        query = self.session.query(SupportRequestModel)
        if request_type:
            query = query.filter(SupportRequestModel.type == request_type)
        if status:
            query = query.filter(SupportRequestModel.status == status)
        if category:
            query = query.filter(SupportRequestModel.category == category)
        return query

    @staticmethod
    def _to_entity(model: SupportRequestModel) -> SupportRequest:
        return SupportRequest(
            id=model.id,
            type=model.type,
            title=model.title,
            description=model.description,
            email=model.email,
            category=model.category,
            app_version=model.app_version,
            platform=model.platform,
            status=model.status,
            submitted_by=Creator(
                identity=model.submitted_by_identity, email=model.submitted_by_email
            ),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["SupportRequestRepository"]
