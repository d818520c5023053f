"""Use cases listing the spots a user wants to visit or already planned."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum

from sqlalchemy.orm import Session

from moptabi.domain.entities import Spot, Wishlist
from moptabi.infrastructure.repositories import TripRepository, WishlistRepository
from moptabi.utils import end_of_day, start_of_day


class UnvisitedSortBy(str, Enum):
    PRIORITY = "priority"
    CREATED_AT = "createdAt"


class VisitedSortBy(str, Enum):
    VISITED_AT = "visitedAt"
    CREATED_AT = "createdAt"
    PLAN_DATE = "planDate"
    VISIT_COUNT = "visitCount"


@dataclass
class VisitedSpot:
    """A visited wishlist entry, or a spot taken from one of the user's plans.

    Plan-derived rows have no wishlist entry; ``id`` is then the plan spot id.
    """

    id: int
    spot_id: str
    user_id: str
    visit_count: int
    spot: Spot | None
    memo: str | None = None
    priority: int = 1
    visited: int = 0
    wishlist: Wishlist | None = None
    plan_date: str | None = None

    @property
    def sort_date(self) -> str:
        if self.plan_date:
            return self.plan_date
        if self.wishlist is not None and self.wishlist.visited_at is not None:
            return self.wishlist.visited_at.date().isoformat()
        return ""


def list_unvisited_spots(
    session: Session,
    user_id: str,
    *,
    prefecture: str | None = None,
    priority: int | None = None,
    sort_by: UnvisitedSortBy = UnvisitedSortBy.PRIORITY,
    sort_order: str = "desc",
) -> Sequence[Wishlist]:
    return WishlistRepository(session).list_filtered(
        user_id,
        visited=0,
        prefecture=prefecture,
        priority=priority,
        sort_by=sort_by.value,
        sort_order=sort_order,
    )


def list_visited_spots(
    session: Session,
    user_id: str,
    *,
    prefecture: str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
    min_visit_count: int | None = None,
    sort_by: VisitedSortBy = VisitedSortBy.VISITED_AT,
    sort_order: str = "desc",
) -> list[VisitedSpot]:
    """Return visited wishlist entries followed by spots from the user's plans.

    Plan spots already covered by a visited entry are dropped and repeated
    plan spots collapse to their first occurrence. ``visit_count`` counts the
    visited entry plus every plan occurrence of the spot.
    """

    visited = WishlistRepository(session).list_filtered(
        user_id,
        visited=1,
        prefecture=prefecture,
        visited_from=start_of_day(date_from) if date_from else None,
        visited_to=end_of_day(date_to) if date_to else None,
        sort_by=sort_by.value if sort_by != VisitedSortBy.PLAN_DATE else None,
        sort_order=sort_order,
    )
    plan_spots = TripRepository(session).list_plan_spots(
        user_id,
        prefecture=prefecture,
        date_from=date_from.isoformat() if date_from else None,
        date_to=date_to.isoformat() if date_to else None,
        sort_order=sort_order if sort_by != VisitedSortBy.VISIT_COUNT else None,
    )

    visit_counts = Counter(entry.spot_id for entry in visited)
    visit_counts.update(plan_spot.spot_id for plan_spot, _ in plan_spots)

    rows = [
        VisitedSpot(
            id=entry.id,
            spot_id=entry.spot_id,
            user_id=user_id,
            visit_count=visit_counts[entry.spot_id],
            spot=entry.spot,
            memo=entry.memo,
            priority=entry.priority,
            visited=entry.visited,
            wishlist=entry,
        )
        for entry in visited
    ]

    seen = {entry.spot_id for entry in visited}
    for plan_spot, plan_date in plan_spots:
        if plan_spot.spot_id in seen:
            continue
        seen.add(plan_spot.spot_id)
        rows.append(
            VisitedSpot(
                id=plan_spot.id,
                spot_id=plan_spot.spot_id,
                user_id=user_id,
                visit_count=visit_counts[plan_spot.spot_id],
                spot=plan_spot.spot,
                memo=plan_spot.memo,
                plan_date=plan_date,
            )
        )

    if min_visit_count is not None:
        rows = [row for row in rows if row.visit_count >= min_visit_count]

    reverse = sort_order == "desc"
    if sort_by == VisitedSortBy.VISIT_COUNT:
        rows.sort(key=lambda row: row.visit_count, reverse=reverse)
    elif sort_by == VisitedSortBy.PLAN_DATE:
        rows.sort(key=lambda row: row.sort_date, reverse=reverse)
    return rows
