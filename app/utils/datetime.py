"""Clock helpers shared by the messaging entities and their tables.

Timestamps travel through the domain as aware datetimes in the configured
``APP_TIMEZONE`` and are written to the database as naive values in that
same zone.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

FALLBACK_TIMEZONE: Final[tzinfo] = timezone.utc


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone named by ``APP_TIMEZONE``, or UTC when unknown.

    Besides IANA names, fixed offsets such as ``+05:30`` or ``UTC-3`` are
    accepted for hosts without a timezone database.
    """

    name = (get_settings().app_timezone or "").strip()
    if not name or name.upper() in {"UTC", "Z"}:
        return FALLBACK_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return _parse_fixed_offset(name) or FALLBACK_TIMEZONE


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Column default for ``created_at``/``read_at`` style fields."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the application timezone.

    Naive values are the ones read back from the database, so they are
    assumed to already be expressed in the application timezone.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return the naive wall-clock form of ``value`` for storage."""

    if value is None:
        return None
    return ensure_app_timezone(value).replace(tzinfo=None)


def _parse_fixed_offset(name: str) -> tzinfo | None:
    raw = name.upper()
    for prefix in ("UTC", "GMT"):
        if raw.startswith(prefix):
            raw = raw[len(prefix):]
            break
    if not raw or raw[0] not in "+-":
        return None

    sign = -1 if raw[0] == "-" else 1
    hours, _, minutes = raw[1:].partition(":")
    if not minutes and len(hours) == 4:
        hours, minutes = hours[:2], hours[2:]
    if not hours.isdigit() or (minutes and not minutes.isdigit()):
        return None
    offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
    if offset >= timedelta(hours=24):
        return None
    return timezone(sign * offset)
