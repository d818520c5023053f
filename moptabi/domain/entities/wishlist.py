"""Domain entity representing a wishlist entry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .spot import Spot

MIN_PRIORITY = 1
MAX_PRIORITY = 5


@dataclass
class Wishlist:
    """A place the user wants to visit.

    ``visited`` is kept as ``0``/``1`` to match the stored representation.
    """

    id: int | None
    user_id: str
    spot_id: str
    priority: int = MIN_PRIORITY
    visited: int = 0
    memo: str | None = None
    visited_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    spot: Spot | None = None


__all__ = ["MAX_PRIORITY", "MIN_PRIORITY", "Wishlist"]
