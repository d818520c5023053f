"""Use case for adding a spot to a user's wishlist."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from moptabi.domain.entities import Spot, Wishlist
from moptabi.domain.exceptions import DuplicateEntryError, LimitExceededError
from moptabi.domain.limits import (
    LimitType,
    get_limit_error_message,
    is_wishlist_limit_reached,
)
from moptabi.infrastructure.repositories import SpotRepository, WishlistRepository
from moptabi.utils import ensure_naive_utc, utc_now

logger = logging.getLogger(__name__)

DUPLICATE_WISHLIST_MESSAGE = "Wishlist entry already exists for this spot"


def create_wishlist_entry(
    session: Session,
    *,
    user_id: str,
    spot: Spot,
    memo: str | None = None,
    priority: int = 1,
    visited: int = 0,
    visited_at: datetime | None = None,
) -> Wishlist:
    """Add ``spot`` to the wishlist of ``user_id``.

    The cap is checked before anything is written. The spot and its metadata
    are registered on first use.
    """

    repository = WishlistRepository(session)
    current = repository.count_for_user(user_id)
    if is_wishlist_limit_reached(current):
        logger.info("Wishlist limit reached for user %s (%d entries)", user_id, current)
        raise LimitExceededError(get_limit_error_message(LimitType.WISHLIST))

    if repository.get_by_spot(user_id, spot.id) is not None:
        raise DuplicateEntryError(DUPLICATE_WISHLIST_MESSAGE)

    spots = SpotRepository(session)
    if not spots.exists(spot.id):
        spots.add(spot)

    now = utc_now()
    try:
        return repository.create(
            Wishlist(
                id=None,
                user_id=user_id,
                spot_id=spot.id,
                priority=priority,
                visited=visited,
                memo=memo,
                visited_at=ensure_naive_utc(visited_at),
                created_at=now,
                updated_at=now,
            )
        )
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateEntryError(DUPLICATE_WISHLIST_MESSAGE) from exc
