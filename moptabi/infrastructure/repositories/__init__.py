"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .spot_repository import SpotRepository
from .trip_repository import TripRepository
from .user_repository import UserRepository
from .wishlist_repository import WishlistRepository

__all__ = [
    "NotificationRepository",
    "SpotRepository",
    "TripRepository",
    "UserRepository",
    "WishlistRepository",
]
