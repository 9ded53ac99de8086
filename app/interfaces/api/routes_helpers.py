"""Helper utilities shared across API route handlers."""

from typing import NoReturn

from fastapi import HTTPException

from app.domain.exceptions import MessagingError


def raise_http_error(exc: MessagingError) -> NoReturn:
    """Re-raise a use case error as the matching HTTP response."""

    raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
