"""Pydantic models for wishlist payloads."""

from __future__ import annotations

from pydantic import Field, model_validator

from moptabi.domain.entities.wishlist import MAX_PRIORITY, MIN_PRIORITY

from .base import CamelModel, UtcDateTime
from .spot import SpotInput, SpotRead


class WishlistRead(CamelModel):
    id: int
    spot_id: str
    user_id: str
    memo: str | None = None
    priority: int
    visited: int
    visited_at: UtcDateTime | None = None
    created_at: UtcDateTime
    updated_at: UtcDateTime
    spot: SpotRead | None = None


class WishlistCreate(CamelModel):
    """Payload used to add a spot to the wishlist."""

    spot_id: str = Field(..., min_length=1, max_length=255)
    spot: SpotInput
    memo: str | None = Field(default=None, max_length=1000)
    priority: int = Field(default=MIN_PRIORITY, ge=MIN_PRIORITY, le=MAX_PRIORITY)
    visited: int = Field(default=0, ge=0, le=1)
    visited_at: UtcDateTime | None = None

    @model_validator(mode="after")
    def _spot_matches(self) -> "WishlistCreate":
        if self.spot.id != self.spot_id:
            raise ValueError("spotId must match spot.id")
        return self


class WishlistUpdate(CamelModel):
    """Partial update of a wishlist entry; omitted fields are left untouched."""

    memo: str | None = Field(default=None, max_length=1000)
    priority: int | None = Field(default=None, ge=MIN_PRIORITY, le=MAX_PRIORITY)
    visited: int | None = Field(default=None, ge=0, le=1)
    visited_at: UtcDateTime | None = None


class CountWithLimitRead(CamelModel):
    count: int
    limit: int


class VisitedSpotRead(CamelModel):
    """A visited wishlist entry or a spot taken from one of the caller's plans.

    Plan-derived rows report the plan day as ``visitedAt``.
    """

    id: int
    spot_id: str
    user_id: str
    memo: str | None = None
    priority: int
    visited: int
    visited_at: UtcDateTime | str | None = None
    created_at: UtcDateTime | None = None
    plan_date: str | None = None
    visit_count: int
    spot: SpotRead | None = None


__all__ = [
    "CountWithLimitRead",
    "VisitedSpotRead",
    "WishlistCreate",
    "WishlistRead",
    "WishlistUpdate",
]
