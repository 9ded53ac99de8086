"""Resolve who receives a newly sent message."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import (
    MESSAGE_TYPE_BROADCAST,
    BroadcastTarget,
    DeliveryTarget,
    IndividualTarget,
)
from app.domain.exceptions import MessageValidationError
from app.infrastructure.repositories import OrganizerRepository
from app.utils import filter_document_ids


def build_delivery_target(
    message_type: str | None, recipient_ids: Sequence[object] | None
) -> DeliveryTarget:
    """Return the fan-out strategy for ``message_type``.

    Anything other than ``"broadcast"`` is treated as an individual message.
    Malformed identifiers are dropped; an empty result is rejected.
    """

    if message_type == MESSAGE_TYPE_BROADCAST:
        return BroadcastTarget()

    if not isinstance(recipient_ids, (list, tuple)) or not recipient_ids:
        raise MessageValidationError(
            "recipient_ids must be a non-empty list for individual messages",
            details={"field": "recipient_ids"},
        )
    organizer_ids = filter_document_ids(recipient_ids)
    if not organizer_ids:
        raise MessageValidationError(
            "no valid recipient IDs", details={"field": "recipient_ids"}
        )
    return IndividualTarget(organizer_ids=tuple(organizer_ids))


def resolve_recipients(session: Session, target: DeliveryTarget) -> list[str]:
    """Expand ``target`` into the concrete list of organizer identifiers."""

    if isinstance(target, BroadcastTarget):
        return list(OrganizerRepository(session).list_active_ids())
    if isinstance(target, IndividualTarget):
        return list(target.organizer_ids)
    raise TypeError(f"Unsupported delivery target: {target!r}")


__all__ = ["build_delivery_target", "resolve_recipients"]
