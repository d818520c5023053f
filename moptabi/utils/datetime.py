"""Helpers for working with timestamps stored as naive UTC."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from moptabi.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "Asia/Tokyo"


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The timezone is resolved using the ``APP_TIMEZONE`` environment variable.
    Unknown names fall back to ``Asia/Tokyo``.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        return ZoneInfo(_DEFAULT_TIMEZONE)


def utc_now() -> datetime:
    """Return the current UTC time without ``tzinfo`` as stored in the database."""

    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive database value so it serializes with a ``Z`` suffix."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def ensure_naive_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` converted to UTC with ``tzinfo`` stripped.

    Naive inputs are assumed to already be UTC.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min)


def end_of_day(value: date) -> datetime:
    """Return the last representable instant of ``value``."""

    return datetime.combine(value, time.max)


def to_epoch_millis(value: datetime | None) -> int | None:
    utc_value = ensure_utc(value)
    if utc_value is None:
        return None
    return int(utc_value.timestamp() * 1000)


def shift_months(value: datetime, months: int) -> datetime:
    """Move ``value`` by ``months`` calendar months, clamping the day of month."""

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def start_of_current_month_utc(reference: datetime | None = None) -> datetime:
    """Return the first instant of the current month in the app timezone, as naive UTC."""

    tz = get_app_timezone()
    local_now = (ensure_utc(reference) or datetime.now(tz=timezone.utc)).astimezone(tz)
    local_start = local_now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return local_start.astimezone(timezone.utc).replace(tzinfo=None)
