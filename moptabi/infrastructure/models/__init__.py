"""ORM models used by the application infrastructure."""

from .notification import NotificationModel, UserNotificationModel
from .spot import NearestStationModel, SpotMetaModel, SpotModel
from .trip import PlanModel, PlanSpotModel, TransportModel, TripInfoModel, TripModel
from .user import UserModel
from .wishlist import WishlistModel

__all__ = [
    "NearestStationModel",
    "NotificationModel",
    "PlanModel",
    "PlanSpotModel",
    "SpotMetaModel",
    "SpotModel",
    "TransportModel",
    "TripInfoModel",
    "TripModel",
    "UserModel",
    "UserNotificationModel",
    "WishlistModel",
]
