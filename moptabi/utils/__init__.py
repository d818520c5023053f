"""Utility helpers for reusable functionality."""

from .datetime import (
    end_of_day,
    ensure_naive_utc,
    ensure_utc,
    get_app_timezone,
    shift_months,
    start_of_current_month_utc,
    start_of_day,
    to_epoch_millis,
    utc_now,
)

__all__ = [
    "end_of_day",
    "ensure_naive_utc",
    "ensure_utc",
    "get_app_timezone",
    "shift_months",
    "start_of_current_month_utc",
    "start_of_day",
    "to_epoch_millis",
    "utc_now",
]
