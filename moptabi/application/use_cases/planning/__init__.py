"""Use cases for itinerary drafts."""

from .build_store import build_planning_store
from .check_validation import (
    DATE_RANGE_INVALID,
    DATE_REQUIRED,
    MEMO_TOO_LONG,
    SPOTS_REQUIRED,
    TITLE_REQUIRED,
    check_validation,
    dates_between,
)

__all__ = [
    "DATE_RANGE_INVALID",
    "DATE_REQUIRED",
    "MEMO_TOO_LONG",
    "SPOTS_REQUIRED",
    "TITLE_REQUIRED",
    "build_planning_store",
    "check_validation",
    "dates_between",
]
