"""Use cases for reading, updating and deleting wishlist entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from moptabi.domain.entities import Wishlist
from moptabi.domain.exceptions import NotFoundError
from moptabi.domain.limits import MAX_WISHLIST_SPOTS
from moptabi.infrastructure.repositories import WishlistRepository
from moptabi.utils import ensure_naive_utc

WISHLIST_NOT_FOUND = "Wishlist entry not found"

_UNSET = object()


@dataclass(frozen=True)
class WishlistCount:
    count: int
    limit: int = MAX_WISHLIST_SPOTS


def list_wishlist(session: Session, user_id: str) -> Sequence[Wishlist]:
    return WishlistRepository(session).list_for_user(user_id)


def count_wishlist(session: Session, user_id: str) -> WishlistCount:
    return WishlistCount(count=WishlistRepository(session).count_for_user(user_id))


def update_wishlist_entry(
    session: Session,
    *,
    user_id: str,
    entry_id: int,
    memo=_UNSET,
    priority: int | None = None,
    visited: int | None = None,
    visited_at=_UNSET,
) -> Wishlist:
    """Apply the provided changes to an entry owned by ``user_id``.

    ``memo`` and ``visited_at`` may be explicitly cleared with ``None``.
    """

    repository = WishlistRepository(session)
    entry = repository.get_for_user(entry_id, user_id)
    if entry is None:
        raise NotFoundError(WISHLIST_NOT_FOUND)

    if memo is not _UNSET:
        entry.memo = memo
    if priority is not None:
        entry.priority = priority
    if visited is not None:
        entry.visited = visited
    if visited_at is not _UNSET:
        entry.visited_at = ensure_naive_utc(visited_at)
    return repository.update(entry)


def delete_wishlist_entry(session: Session, *, user_id: str, entry_id: int) -> None:
    repository = WishlistRepository(session)
    if repository.get_for_user(entry_id, user_id) is None:
        raise NotFoundError(WISHLIST_NOT_FOUND)
    repository.delete(entry_id)
