"""Aggregate application use cases."""

from .messages import list_messages_for_organizer, mark_message_read, send_message
from .notifications import (
    count_unread_broadcasts,
    list_broadcasts,
    mark_all_broadcasts_read,
    mark_broadcast_read,
)
from .support import (
    list_support_requests,
    submit_support_request,
    update_support_request_status,
)

__all__ = [
    "count_unread_broadcasts",
    "list_broadcasts",
    "list_messages_for_organizer",
    "list_support_requests",
    "mark_all_broadcasts_read",
    "mark_broadcast_read",
    "mark_message_read",
    "send_message",
    "submit_support_request",
    "update_support_request_status",
]
