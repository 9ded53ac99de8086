"""Persistence layer for the organizer directory."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Organizer
from app.infrastructure.models import OrganizerModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

from .store_errors import store_operation


class OrganizerRepository:
    """Read access to organizer profiles used for message delivery."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active_ids(self) -> Sequence[str]:
        with store_operation(self.session, "list active organizers"):
            query = (
                self.session.query(OrganizerModel.id)
                .filter(OrganizerModel.is_active.is_(True))
                .order_by(OrganizerModel.created_at.asc(), OrganizerModel.id.asc())
            )
            return [row.id for row in query.all()]

    def get(self, organizer_id: str) -> Organizer | None:
        with store_operation(self.session, "load organizer"):
            model = self.session.get(OrganizerModel, organizer_id)
        return self._to_entity(model) if model else None

    def get_by_identity(self, identity_id: str) -> Organizer | None:
        with store_operation(self.session, "load organizer by identity"):
            model = (
                self.session.query(OrganizerModel)
                .filter(OrganizerModel.identity_id == identity_id)
                .first()
            )
        return self._to_entity(model) if model else None

    def create(self, organizer: Organizer) -> Organizer:
        model = OrganizerModel(
            identity_id=organizer.identity_id,
            name=organizer.name,
            email=organizer.email.strip().lower(),
            is_active=organizer.is_active,
        )
        if organizer.id:
            model.id = organizer.id
        if organizer.created_at is not None:
            model.created_at = ensure_app_naive_datetime(organizer.created_at)
        with store_operation(self.session, "create organizer"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: OrganizerModel) -> Organizer:
        return Organizer(
            id=model.id,
            identity_id=model.identity_id,
            name=model.name,
            email=model.email,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["OrganizerRepository"]
