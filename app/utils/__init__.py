"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
)
from .identifiers import filter_document_ids, is_document_id, normalize_document_id

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "filter_document_ids",
    "get_app_timezone",
    "is_document_id",
    "normalize_document_id",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
]
