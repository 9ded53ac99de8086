"""Use cases for broadcast notifications and their read receipts."""

from .delete_broadcast import delete_broadcast
from .list_broadcasts import list_broadcasts, normalize_feed_limit
from .mark_read import mark_all_broadcasts_read, mark_broadcast_read
from .unread_count import count_unread_broadcasts

__all__ = [
    "count_unread_broadcasts",
    "delete_broadcast",
    "list_broadcasts",
    "mark_all_broadcasts_read",
    "mark_broadcast_read",
    "normalize_feed_limit",
]
