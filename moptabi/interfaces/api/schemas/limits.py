"""Pydantic model exposing the application caps."""

from __future__ import annotations

from .base import CamelModel


class LimitsRead(CamelModel):
    max_wishlist_spots: int
    max_plans: int
    max_spots_per_day: int
    max_plan_days: int
    messages: dict[str, str]


__all__ = ["LimitsRead"]
