"""Domain entities for published notifications and their per-user read state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    SYSTEM = "SYSTEM"
    INFO = "INFO"


@dataclass
class Notification:
    """Message published to every user."""

    id: int | None
    title: str
    content: str
    type: NotificationType
    published_at: datetime
    created_at: datetime | None = None


@dataclass
class UserNotification:
    """Read state of a :class:`Notification` for one recipient."""

    id: int | None
    user_id: str
    notification_id: int
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None
    notification: Notification | None = None


def compute_read_rate(read_count: int, total_recipients: int) -> int:
    """Return the read percentage rounded half up, ``0`` when nobody received it."""

    if total_recipients <= 0:
        return 0
    return (read_count * 200 + total_recipients) // (2 * total_recipients)


@dataclass
class NotificationReadStats:
    """A notification annotated with how many of its recipients read it."""

    notification: Notification
    total_recipients: int
    read_count: int

    @property
    def read_rate(self) -> int:
        return compute_read_rate(self.read_count, self.total_recipients)


__all__ = [
    "Notification",
    "NotificationReadStats",
    "NotificationType",
    "UserNotification",
    "compute_read_rate",
]
