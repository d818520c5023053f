"""Use cases for broadcast notifications."""

from .list_admin_notifications import (
    NotificationListPage,
    NotificationSortBy,
    list_admin_notifications,
)
from .publish_notification import (
    create_notification,
    delete_notification,
    update_notification,
)
from .user_notifications import (
    count_unread_notifications,
    list_user_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "NotificationListPage",
    "NotificationSortBy",
    "count_unread_notifications",
    "create_notification",
    "delete_notification",
    "list_admin_notifications",
    "list_user_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "update_notification",
]
