"""Domain entities exposed by the application."""

from .delivery_target import BroadcastTarget, DeliveryTarget, IndividualTarget
from .identity import Creator, Identity
from .message import (
    MESSAGE_BODY_MAX_LENGTH,
    MESSAGE_TITLE_MAX_LENGTH,
    MESSAGE_TYPE_ADMIN,
    MESSAGE_TYPE_BROADCAST,
    MESSAGE_TYPE_INDIVIDUAL,
    MESSAGE_TYPES,
    Message,
    MessageHistoryPage,
    MessageReadState,
    MessageRecipient,
    OrganizerMessage,
    SentMessage,
)
from .notification import (
    BROADCAST_BODY_MAX_LENGTH,
    BROADCAST_TITLE_MAX_LENGTH,
    BroadcastFeedItem,
    BroadcastNotification,
    NotificationReceipt,
)
from .organizer import Organizer
from .support_request import (
    DEFAULT_SUPPORT_CATEGORY,
    SUPPORT_CATEGORIES,
    SUPPORT_DESCRIPTION_MAX_LENGTH,
    SUPPORT_REQUEST_BUG,
    SUPPORT_REQUEST_FEATURE,
    SUPPORT_REQUEST_TYPES,
    SUPPORT_STATUSES,
    SUPPORT_STATUS_PENDING,
    SUPPORT_TITLE_MAX_LENGTH,
    SupportRequest,
    SupportRequestPage,
)

__all__ = [
    "BROADCAST_BODY_MAX_LENGTH",
    "DEFAULT_SUPPORT_CATEGORY",
    "BROADCAST_TITLE_MAX_LENGTH",
    "BroadcastFeedItem",
    "BroadcastNotification",
    "BroadcastTarget",
    "Creator",
    "DeliveryTarget",
    "Identity",
    "IndividualTarget",
    "MESSAGE_BODY_MAX_LENGTH",
    "MESSAGE_TITLE_MAX_LENGTH",
    "MESSAGE_TYPES",
    "MESSAGE_TYPE_ADMIN",
    "MESSAGE_TYPE_BROADCAST",
    "MESSAGE_TYPE_INDIVIDUAL",
    "Message",
    "MessageHistoryPage",
    "MessageReadState",
    "MessageRecipient",
    "NotificationReceipt",
    "Organizer",
    "OrganizerMessage",
    "SUPPORT_CATEGORIES",
    "SUPPORT_DESCRIPTION_MAX_LENGTH",
    "SUPPORT_REQUEST_BUG",
    "SUPPORT_REQUEST_FEATURE",
    "SUPPORT_REQUEST_TYPES",
    "SUPPORT_STATUSES",
    "SUPPORT_STATUS_PENDING",
    "SUPPORT_TITLE_MAX_LENGTH",
    "SentMessage",
    "SupportRequest",
    "SupportRequestPage",
]
