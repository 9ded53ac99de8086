"""Use cases for bug reports and feature requests."""

from .list_support_requests import list_support_requests
from .submit_support_request import normalize_category, submit_support_request
from .update_support_request_status import update_support_request_status

__all__ = [
    "list_support_requests",
    "normalize_category",
    "submit_support_request",
    "update_support_request_status",
]
