"""Repository implementations for infrastructure layer."""

from .message_repository import MessageRepository
from .notification_repository import (
    BroadcastNotificationRepository,
    NotificationReceiptRepository,
)
from .organizer_repository import OrganizerRepository
from .store_errors import store_operation
from .support_request_repository import SupportRequestRepository

__all__ = [
    "BroadcastNotificationRepository",
    "MessageRepository",
    "NotificationReceiptRepository",
    "OrganizerRepository",
    "SupportRequestRepository",
    "store_operation",
]
