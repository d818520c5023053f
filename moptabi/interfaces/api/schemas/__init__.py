from .base import CamelModel, UtcDateTime
from .limits import LimitsRead
from .notification import (
    AdminNotificationListResponse,
    AdminNotificationRead,
    MarkAllReadResponse,
    MarkReadResponse,
    NotificationCreate,
    NotificationRead,
    NotificationUpdate,
    UnreadCountRead,
    UserNotificationRead,
)
from .pagination import PaginationRead
from .planning import (
    DraftLocationInput,
    DraftPlanInput,
    DraftSpotInput,
    DraftTransportInput,
    DraftTripInfoInput,
    DraftValidationResult,
    TripDraft,
)
from .spot import (
    EndpointHistoryRead,
    EndpointLocationRead,
    NearestStationRead,
    OpeningHoursSchema,
    SpotDetailRead,
    SpotInput,
    SpotMetaInput,
    SpotMetaRead,
    SpotRead,
)
from .trip import (
    ImageUploadRead,
    MessageResponse,
    PlanDetailRead,
    PlanRead,
    PlanSpotRead,
    TransportRead,
    TripCreate,
    TripDetailRead,
    TripInfoInput,
    TripInfoRead,
    TripPlanInput,
    TripRead,
    TripSpotInput,
)
from .user import (
    AuthSyncResponse,
    DashboardStatsRead,
    TripStatsRead,
    UserListItemRead,
    UserListResponse,
    UserRead,
    WishlistStatsRead,
)
from .wishlist import (
    CountWithLimitRead,
    VisitedSpotRead,
    WishlistCreate,
    WishlistRead,
    WishlistUpdate,
)

__all__ = [
    "AdminNotificationListResponse",
    "AdminNotificationRead",
    "AuthSyncResponse",
    "CamelModel",
    "CountWithLimitRead",
    "DashboardStatsRead",
    "DraftLocationInput",
    "DraftPlanInput",
    "DraftSpotInput",
    "DraftTransportInput",
    "DraftTripInfoInput",
    "DraftValidationResult",
    "EndpointHistoryRead",
    "EndpointLocationRead",
    "ImageUploadRead",
    "LimitsRead",
    "MarkAllReadResponse",
    "MarkReadResponse",
    "MessageResponse",
    "NearestStationRead",
    "NotificationCreate",
    "NotificationRead",
    "NotificationUpdate",
    "OpeningHoursSchema",
    "PaginationRead",
    "PlanDetailRead",
    "PlanRead",
    "PlanSpotRead",
    "SpotDetailRead",
    "SpotInput",
    "SpotMetaInput",
    "SpotMetaRead",
    "SpotRead",
    "TransportRead",
    "TripCreate",
    "TripDetailRead",
    "TripDraft",
    "TripInfoInput",
    "TripInfoRead",
    "TripPlanInput",
    "TripRead",
    "TripSpotInput",
    "TripStatsRead",
    "UnreadCountRead",
    "UserListItemRead",
    "UserListResponse",
    "UserNotificationRead",
    "UserRead",
    "VisitedSpotRead",
    "UtcDateTime",
    "WishlistCreate",
    "WishlistRead",
    "WishlistStatsRead",
    "WishlistUpdate",
]
