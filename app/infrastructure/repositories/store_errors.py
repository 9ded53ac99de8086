"""Translate persistence failures into :class:`StoreError`."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(session: Session, operation: str) -> Iterator[None]:
    """Roll back and raise :class:`StoreError` when ``operation`` fails."""

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Store operation '%s' failed", operation)
        raise StoreError(
            f"Failed to {operation}", details={"operation": operation}
        ) from exc


__all__ = ["store_operation"]
