from .common import ApiResponse
from .message import (
    CreatorRead,
    MessageCreate,
    MessageHistoryItemRead,
    MessageHistoryPageRead,
    MessageReadStateRead,
    OrganizerMessageRead,
    SentMessageRead,
)
from .notification import BroadcastFeedItemRead, MarkAllReadResult, UnreadCountRead
from .support import (
    SupportRequestCreate,
    SupportRequestDetailRead,
    SupportRequestPageRead,
    SupportRequestRead,
    SupportRequestStatusRead,
    SupportRequestStatusUpdate,
)

__all__ = [
    "ApiResponse",
    "BroadcastFeedItemRead",
    "CreatorRead",
    "MarkAllReadResult",
    "MessageCreate",
    "MessageHistoryItemRead",
    "MessageHistoryPageRead",
    "MessageReadStateRead",
    "OrganizerMessageRead",
    "SentMessageRead",
    "SupportRequestCreate",
    "SupportRequestDetailRead",
    "SupportRequestPageRead",
    "SupportRequestRead",
    "SupportRequestStatusRead",
    "SupportRequestStatusUpdate",
    "UnreadCountRead",
]
