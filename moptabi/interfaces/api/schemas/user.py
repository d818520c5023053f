"""Pydantic models for user and administrator payloads."""

from __future__ import annotations

from moptabi.domain.entities import RoleType

from .base import CamelModel, UtcDateTime
from .pagination import PaginationRead


class UserRead(CamelModel):
    id: str
    role: RoleType
    email: str | None = None
    name: str | None = None
    image: str | None = None
    created_at: UtcDateTime
    last_login_at: UtcDateTime | None = None


class AuthSyncResponse(CamelModel):
    status: int
    user: UserRead


class UserListItemRead(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str | None = None
    image_url: str | None = None
    registered_at: int
    last_login_at: int | None = None
    role: RoleType
    plan_count: int
    wishlist_count: int


class UserListResponse(CamelModel):
    users: list[UserListItemRead]
    pagination: PaginationRead


class WishlistStatsRead(CamelModel):
    total_wishlist: int
    wishlist_increase_from_last_month: int


class TripStatsRead(CamelModel):
    total_plans: int
    plan_increase_from_last_month: int
    average_date_per_user_plan: float


class DashboardStatsRead(CamelModel):
    total_users: int
    active_user_count_from_last_month: int
    wishlist_stats: WishlistStatsRead
    trip_stats: TripStatsRead


__all__ = [
    "AuthSyncResponse",
    "DashboardStatsRead",
    "TripStatsRead",
    "UserListItemRead",
    "UserListResponse",
    "UserRead",
    "WishlistStatsRead",
]
