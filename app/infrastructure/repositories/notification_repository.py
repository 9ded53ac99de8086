"""Persistence helpers for broadcast notifications and read receipts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import BroadcastNotification, Creator, NotificationReceipt
from app.infrastructure.database import generate_document_id
from app.infrastructure.models import (
    BroadcastNotificationModel,
    NotificationReceiptModel,
)
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .store_errors import store_operation


class BroadcastNotificationRepository:
    """Provide CRUD operations for :class:`BroadcastNotification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent(self, *, limit: int) -> Sequence[BroadcastNotification]:
        with store_operation(self.session, "list broadcast notifications"):
            query = (
                self.session.query(BroadcastNotificationModel)
                .order_by(
                    BroadcastNotificationModel.created_at.desc(),
                    BroadcastNotificationModel.id.desc(),
                )
                .limit(limit)
            )
            return [self._to_entity(model) for model in query.all()]

    def list_ids(self) -> Sequence[str]:
        with store_operation(self.session, "list broadcast notification ids"):
            query = self.session.query(BroadcastNotificationModel.id)
            return [row.id for row in query.all()]

    def count(self) -> int:
        with store_operation(self.session, "count broadcast notifications"):
            return (
                self.session.query(func.count(BroadcastNotificationModel.id)).scalar()
                or 0
            )

    def get(self, notification_id: str) -> BroadcastNotification | None:
        with store_operation(self.session, "load broadcast notification"):
            model = self.session.get(BroadcastNotificationModel, notification_id)
            return self._to_entity(model) if model else None

    def exists(self, notification_id: str) -> bool:
        with store_operation(self.session, "check broadcast notification"):
            query = self.session.query(BroadcastNotificationModel.id).filter(
                BroadcastNotificationModel.id == notification_id
            )
            return bool(self.session.query(query.exists()).scalar())

    def create(self, notification: BroadcastNotification) -> BroadcastNotification:
        model = BroadcastNotificationModel(
            title=notification.title,
            body=notification.body,
            created_by_identity=notification.created_by.identity,
            created_by_email=notification.created_by.email,
            created_at=ensure_app_naive_datetime(
                notification.created_at or now_in_app_timezone()
            ),
        )
        with store_operation(self.session, "create broadcast notification"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, notification_id: str) -> bool:
        """Delete a broadcast together with the receipts pointing at it."""

        with store_operation(self.session, "delete broadcast notification"):
            self.session.query(NotificationReceiptModel).filter(
                NotificationReceiptModel.notification_id == notification_id
            ).delete(synchronize_session=False)
            deleted = (
                self.session.query(BroadcastNotificationModel)
                .filter(BroadcastNotificationModel.id == notification_id)
                .delete(synchronize_session=False)
            )
            self.session.commit()
        return deleted > 0

    @staticmethod
    def _to_entity(model: BroadcastNotificationModel) -> BroadcastNotification:
        return BroadcastNotification(
            id=model.id,
            title=model.title,
            body=model.body,
            created_by=Creator(
                identity=model.created_by_identity, email=model.created_by_email
            ),
            created_at=ensure_app_timezone(model.created_at),
        )


class NotificationReceiptRepository:
    """Store per-user read markers for broadcast notifications.

    Receipts are only ever written through :meth:`upsert_read`, which relies on
    the ``(notification_id, user_id)`` unique constraint so that concurrent
    callers converge on a single row. An existing ``read_at`` is preserved.
    """

    _UPSERT_DIALECTS = ("sqlite", "postgresql")

    def __init__(self, session: Session) -> None:
        self.session = session

    def read_notification_ids(
        self, user_id: str, notification_ids: Iterable[str]
    ) -> set[str]:
        ids = [notification_id for notification_id in notification_ids if notification_id]
        if not ids:
            return set()
        with store_operation(self.session, "load notification receipts"):
            query = (
                self.session.query(NotificationReceiptModel.notification_id)
                .filter(NotificationReceiptModel.user_id == user_id)
                .filter(NotificationReceiptModel.notification_id.in_(ids))
                .filter(NotificationReceiptModel.read_at.is_not(None))
            )
            return {row.notification_id for row in query.all()}

    def count_read(self, user_id: str) -> int:
        with store_operation(self.session, "count notification receipts"):
            return (
                self.session.query(func.count(NotificationReceiptModel.id))
                .filter(NotificationReceiptModel.user_id == user_id)
                .filter(NotificationReceiptModel.read_at.is_not(None))
                .scalar()
                or 0
            )

    def get_for(
        self, *, notification_id: str, user_id: str
    ) -> NotificationReceipt | None:
        with store_operation(self.session, "load notification receipt"):
            model = (
                self.session.query(NotificationReceiptModel)
                .filter(NotificationReceiptModel.notification_id == notification_id)
                .filter(NotificationReceiptModel.user_id == user_id)
                .first()
            )
        if model is None:
            return None
        return NotificationReceipt(
            id=model.id,
            notification_id=model.notification_id,
            user_id=model.user_id,
            read_at=ensure_app_timezone(model.read_at),
        )

    def upsert_read(
        self,
        notification_ids: Iterable[str],
        *,
        user_id: str,
        read_at: datetime | None = None,
    ) -> int:
        """Mark every id in ``notification_ids`` read for ``user_id``.

        All rows are sent as one batch of independent upserts. Returns the
        number of notifications processed.
        """

        ids = list(dict.fromkeys(notification_ids))
        if not ids:
            return 0
        stamp = ensure_app_naive_datetime(read_at or now_in_app_timezone())
        rows = [
            {
                "id": generate_document_id(),
                "notification_id": notification_id,
                "user_id": user_id,
                "read_at": stamp,
                "created_at": stamp,
            }
            for notification_id in ids
        ]

        dialect = self.session.get_bind().dialect.name
        with store_operation(self.session, "mark broadcast notifications read"):
            if dialect in self._UPSERT_DIALECTS:
                self.session.execute(self._on_conflict_statement(dialect, rows))
            else:
                for row in rows:
                    self._insert_or_fill(row)
            self.session.commit()
        return len(ids)

    @staticmethod
    def _on_conflict_statement(dialect: str, rows: list[dict]):
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        else:
            from sqlalchemy.dialects.sqlite import insert

        statement = insert(NotificationReceiptModel).values(rows)
        return statement.on_conflict_do_update(
            index_elements=[
                NotificationReceiptModel.notification_id,
                NotificationReceiptModel.user_id,
            ],
            set_={
                "read_at": func.coalesce(
                    NotificationReceiptModel.read_at, statement.excluded.read_at
                )
            },
        )

    def _insert_or_fill(self, row: dict) -> None:
        try:
            with self.session.begin_nested():
                self.session.add(NotificationReceiptModel(**row))
        except IntegrityError:
            self.session.query(NotificationReceiptModel).filter(
                NotificationReceiptModel.notification_id == row["notification_id"],
                NotificationReceiptModel.user_id == row["user_id"],
                NotificationReceiptModel.read_at.is_(None),
            ).update(
                {NotificationReceiptModel.read_at: row["read_at"]},
                synchronize_session=False,
            )


__all__ = ["BroadcastNotificationRepository", "NotificationReceiptRepository"]
