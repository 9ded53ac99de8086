"""Use cases for admin messages and organizer inboxes."""

from .delete_message import delete_message
from .delivery import build_delivery_target, resolve_recipients
from .list_messages import (
    count_unread_messages,
    list_message_history,
    list_messages_for_organizer,
)
from .mark_message_read import mark_all_messages_read, mark_message_read
from .send_message import send_message

__all__ = [
    "build_delivery_target",
    "count_unread_messages",
    "delete_message",
    "list_message_history",
    "list_messages_for_organizer",
    "mark_all_messages_read",
    "mark_message_read",
    "resolve_recipients",
    "send_message",
]
