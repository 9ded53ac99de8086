"""ORM models used by the application infrastructure."""

from .message import MessageModel, MessageRecipientModel
from .notification import BroadcastNotificationModel, NotificationReceiptModel
from .organizer import OrganizerModel
from .support_request import SupportRequestModel

__all__ = [
    "BroadcastNotificationModel",
    "MessageModel",
    "MessageRecipientModel",
    "NotificationReceiptModel",
    "OrganizerModel",
    "SupportRequestModel",
]
