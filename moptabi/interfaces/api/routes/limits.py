"""Endpoint exposing the application caps shared with clients."""

from fastapi import APIRouter

from moptabi.domain.limits import (
    LIMIT_ERROR_MESSAGES,
    MAX_PLAN_DAYS,
    MAX_PLANS,
    MAX_SPOTS_PER_DAY,
    MAX_WISHLIST_SPOTS,
)
from moptabi.interfaces.api.schemas import LimitsRead

router = APIRouter(prefix="/limits", tags=["limits"])


@router.get("", response_model=LimitsRead)
def read_limits() -> LimitsRead:
    return LimitsRead(
        max_wishlist_spots=MAX_WISHLIST_SPOTS,
        max_plans=MAX_PLANS,
        max_spots_per_day=MAX_SPOTS_PER_DAY,
        max_plan_days=MAX_PLAN_DAYS,
        messages={kind.value: message for kind, message in LIMIT_ERROR_MESSAGES.items()},
    )
