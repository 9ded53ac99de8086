"""Helpers for working with 24 character hexadecimal store identifiers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

_DOCUMENT_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9a-fA-F]{24}$")


def is_document_id(value: object) -> bool:
    """Return ``True`` when ``value`` looks like a store identifier."""

    return isinstance(value, str) and bool(_DOCUMENT_ID_PATTERN.match(value))


def normalize_document_id(value: str) -> str:
    return value.lower()


def filter_document_ids(values: Iterable[object]) -> list[str]:
    """Keep well-formed identifiers only, preserving order without duplicates."""

    unique: list[str] = []
    seen: set[str] = set()
    for value in values:
        if not is_document_id(value):
            continue
        normalized = normalize_document_id(value)
        if normalized in seen:
            continue
        seen.add(normalized)
        unique.append(normalized)
    return unique
