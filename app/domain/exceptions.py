"""Errors raised by the messaging use cases."""

from __future__ import annotations

from typing import Any


class MessagingError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500
    error_code = "MESSAGING_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MessageValidationError(MessagingError):
    """Malformed or missing input."""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class NotFoundError(MessagingError):
    """Referenced notification, message or organizer does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        details = {"resource": resource}
        if identifier:
            details["identifier"] = identifier
        super().__init__(f"{resource} not found", details)


class ForbiddenError(MessagingError):
    """The caller is not allowed to act on an existing resource."""

    status_code = 403
    error_code = "FORBIDDEN"


class StoreError(MessagingError):
    """Underlying persistence failure."""

    status_code = 500
    error_code = "STORE_ERROR"

    def __init__(
        self,
        message: str = "Database operation failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


__all__ = [
    "ForbiddenError",
    "MessageValidationError",
    "MessagingError",
    "NotFoundError",
    "StoreError",
]
