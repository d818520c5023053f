"""Use cases for managing users."""

from .count_by_user import count_trips_by_user_id, count_wishlist_by_user_id
from .get_dashboard_stats import DashboardStats, get_dashboard_stats
from .list_users import UserListItem, UserListPage, UserSortBy, list_users
from .sync_user import UserSyncResult, ensure_user, sync_user

__all__ = [
    "DashboardStats",
    "UserListItem",
    "UserListPage",
    "UserSortBy",
    "UserSyncResult",
    "count_trips_by_user_id",
    "count_wishlist_by_user_id",
    "ensure_user",
    "get_dashboard_stats",
    "list_users",
    "sync_user",
]
