"""Per-user aggregate counts used by the administrative views."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from moptabi.infrastructure.repositories import TripRepository, WishlistRepository


def count_wishlist_by_user_id(session: Session, user_ids: Sequence[str]) -> dict[str, int]:
    """Return ``{user_id: wishlist entries}``; users without entries are omitted."""

    return WishlistRepository(session).count_by_user_ids(user_ids)


def count_trips_by_user_id(session: Session, user_ids: Sequence[str]) -> dict[str, int]:
    """Return ``{user_id: trips}``; users without trips are omitted."""

    return TripRepository(session).count_by_user_ids(user_ids)
