"""Domain entities exposed by the application."""

from .notification import (
    Notification,
    NotificationReadStats,
    NotificationType,
    UserNotification,
    compute_read_rate,
)
from .pagination import PaginationInfo, calculate_pagination, paginate
from .spot import (
    NearestStation,
    OpeningHours,
    Spot,
    SpotMeta,
    is_endpoint_spot_id,
)
from .trip import Plan, PlanSpot, Transport, TransportNodeType, Trip, TripInfo
from .user import RoleType, User
from .wishlist import Wishlist

__all__ = [
    "NearestStation",
    "Notification",
    "NotificationReadStats",
    "NotificationType",
    "OpeningHours",
    "PaginationInfo",
    "Plan",
    "PlanSpot",
    "RoleType",
    "Spot",
    "SpotMeta",
    "Transport",
    "TransportNodeType",
    "Trip",
    "TripInfo",
    "User",
    "UserNotification",
    "Wishlist",
    "calculate_pagination",
    "compute_read_rate",
    "is_endpoint_spot_id",
    "paginate",
]
