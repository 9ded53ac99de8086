"""Domain entity representing an event organizer."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Organizer:
    """Organizer profile as seen by the messaging subsystem."""

    id: str | None
    identity_id: str
    name: str
    email: str
    is_active: bool = True
    created_at: datetime | None = None
