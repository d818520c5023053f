"""Use case for the administrative user listing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqlalchemy.orm import Session

from moptabi.domain.entities import PaginationInfo, User, calculate_pagination, paginate
from moptabi.infrastructure.repositories import UserRepository
from moptabi.utils import to_epoch_millis

from .count_by_user import count_trips_by_user_id, count_wishlist_by_user_id


class UserSortBy(str, Enum):
    LAST_LOGIN_AT = "lastLoginAt"
    REGISTERED_AT = "registeredAt"
    PLAN_COUNT = "planCount"
    WISHLIST_COUNT = "wishlistCount"


@dataclass
class UserListItem:
    user: User
    plan_count: int
    wishlist_count: int

    @property
    def registered_at(self) -> int:
        return to_epoch_millis(self.user.created_at) or 0

    @property
    def last_login_at(self) -> int | None:
        return to_epoch_millis(self.user.last_login_at)

    def matches(self, search: str) -> bool:
        full_name = f"{self.user.first_name} {self.user.last_name}".lower()
        email = (self.user.email or "").lower()
        return search in full_name or search in email or search in self.user.id.lower()

    def sort_value(self, sort_by: UserSortBy) -> int:
        if sort_by == UserSortBy.REGISTERED_AT:
            return self.registered_at
        if sort_by == UserSortBy.PLAN_COUNT:
            return self.plan_count
        if sort_by == UserSortBy.WISHLIST_COUNT:
            return self.wishlist_count
        return self.last_login_at or 0


@dataclass
class UserListPage:
    users: list[UserListItem]
    pagination: PaginationInfo


def list_users(
    session: Session,
    *,
    page: int,
    limit: int,
    search: str | None = None,
    sort_by: UserSortBy = UserSortBy.LAST_LOGIN_AT,
    sort_order: str = "desc",
) -> UserListPage:
    """Return one page of users with their plan and wishlist counts.

    Missing timestamps and counts sort as ``0``.
    """

    users = list(UserRepository(session).list())
    user_ids = [user.id for user in users]
    wishlist_counts = count_wishlist_by_user_id(session, user_ids)
    plan_counts = count_trips_by_user_id(session, user_ids)

    items = [
        UserListItem(
            user=user,
            plan_count=plan_counts.get(user.id, 0),
            wishlist_count=wishlist_counts.get(user.id, 0),
        )
        for user in users
    ]

    needle = (search or "").lower()
    if needle:
        items = [item for item in items if item.matches(needle)]

    items.sort(key=lambda item: item.sort_value(sort_by), reverse=sort_order != "asc")

    return UserListPage(
        users=paginate(items, page, limit),
        pagination=calculate_pagination(len(items), page, limit),
    )
