"""Fan-out strategies for newly sent messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .message import MESSAGE_TYPE_BROADCAST, MESSAGE_TYPE_INDIVIDUAL


@dataclass(frozen=True)
class BroadcastTarget:
    """Deliver to every organizer currently flagged active."""

    message_type: str = MESSAGE_TYPE_BROADCAST


@dataclass(frozen=True)
class IndividualTarget:
    """Deliver to an explicit list of organizer identifiers."""

    organizer_ids: tuple[str, ...]
    message_type: str = MESSAGE_TYPE_INDIVIDUAL


DeliveryTarget = Union[BroadcastTarget, IndividualTarget]


__all__ = ["BroadcastTarget", "DeliveryTarget", "IndividualTarget"]
