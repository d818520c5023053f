"""Use case computing the statistics shown on the administrator dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from moptabi.infrastructure.repositories import TripRepository, UserRepository, WishlistRepository
from moptabi.utils import shift_months, start_of_current_month_utc, utc_now


@dataclass(frozen=True)
class WishlistStats:
    total_wishlist: int
    wishlist_increase_from_last_month: int


@dataclass(frozen=True)
class TripStats:
    total_plans: int
    plan_increase_from_last_month: int
    average_date_per_user_plan: float


@dataclass(frozen=True)
class DashboardStats:
    total_users: int
    active_user_count_from_last_month: int
    wishlist_stats: WishlistStats
    trip_stats: TripStats


def get_dashboard_stats(session: Session) -> DashboardStats:
    now = utc_now()
    month_start = start_of_current_month_utc(now)

    users = UserRepository(session)
    wishlists = WishlistRepository(session)
    trips = TripRepository(session)

    total_wishlist = wishlists.count()
    total_plans = trips.count()

    return DashboardStats(
        total_users=users.count(),
        active_user_count_from_last_month=users.count_logged_in_since(shift_months(now, -1)),
        wishlist_stats=WishlistStats(
            total_wishlist=total_wishlist,
            wishlist_increase_from_last_month=total_wishlist
            - wishlists.count(created_before=month_start),
        ),
        trip_stats=TripStats(
            total_plans=total_plans,
            plan_increase_from_last_month=total_plans - trips.count(created_before=month_start),
            average_date_per_user_plan=trips.average_days_per_trip(),
        ),
    )
