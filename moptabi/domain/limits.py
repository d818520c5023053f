"""Application wide caps.

These values are the single source of truth for both the API and its clients;
``GET /limits`` serves them so the frontend never keeps its own copy.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class LimitType(str, Enum):
    WISHLIST = "wishlist"
    PLAN = "plan"
    SPOTS_PER_DAY = "spotsPerDay"
    PLAN_DAYS = "planDays"


MAX_WISHLIST_SPOTS: Final[int] = 100
MAX_PLANS: Final[int] = 20
MAX_SPOTS_PER_DAY: Final[int] = 10
MAX_PLAN_DAYS: Final[int] = 7

APP_LIMITS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "MAX_WISHLIST_SPOTS": MAX_WISHLIST_SPOTS,
        "MAX_PLANS": MAX_PLANS,
        "MAX_SPOTS_PER_DAY": MAX_SPOTS_PER_DAY,
        "MAX_PLAN_DAYS": MAX_PLAN_DAYS,
    }
)

LIMIT_ERROR_MESSAGES: Final[Mapping[LimitType, str]] = MappingProxyType(
    {
        LimitType.WISHLIST: f"行きたいリストの登録上限（{MAX_WISHLIST_SPOTS}件）に達しています",
        LimitType.PLAN: f"プランの作成上限（{MAX_PLANS}件）に達しています",
        LimitType.SPOTS_PER_DAY: f"1日あたりのスポット登録上限（{MAX_SPOTS_PER_DAY}件）に達しています",
        LimitType.PLAN_DAYS: f"プランの日数上限（{MAX_PLAN_DAYS}日）を超えています",
    }
)

_APPROACHING_RATIO: Final[float] = 0.8


def is_wishlist_limit_reached(current_count: int) -> bool:
    return current_count >= MAX_WISHLIST_SPOTS


def is_plan_limit_reached(current_count: int) -> bool:
    return current_count >= MAX_PLANS


def is_spots_per_day_limit_reached(spot_count: int) -> bool:
    return spot_count >= MAX_SPOTS_PER_DAY


def is_plan_days_limit_reached(days_count: int) -> bool:
    return days_count >= MAX_PLAN_DAYS


def get_limit_error_message(kind: LimitType) -> str:
    return LIMIT_ERROR_MESSAGES[LimitType(kind)]


def get_remaining_count(current: int, limit: int) -> int:
    """Return how many more items fit under ``limit`` (never negative)."""

    return max(limit - current, 0)


def is_approaching_limit(current: int, limit: int) -> bool:
    """Return ``True`` once ``current`` reaches 80% of ``limit``."""

    if limit == 0:
        return False
    return current / limit >= _APPROACHING_RATIO


__all__ = [
    "APP_LIMITS",
    "LIMIT_ERROR_MESSAGES",
    "LimitType",
    "MAX_PLANS",
    "MAX_PLAN_DAYS",
    "MAX_SPOTS_PER_DAY",
    "MAX_WISHLIST_SPOTS",
    "get_limit_error_message",
    "get_remaining_count",
    "is_approaching_limit",
    "is_plan_days_limit_reached",
    "is_plan_limit_reached",
    "is_spots_per_day_limit_reached",
    "is_wishlist_limit_reached",
]
