"""Pydantic models describing notification payloads."""

from __future__ import annotations

from pydantic import Field

from moptabi.domain.entities import NotificationType

from .base import CamelModel, UtcDateTime
from .pagination import PaginationRead


class NotificationCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)
    type: NotificationType
    published_at: UtcDateTime


class NotificationUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=100)
    content: str | None = Field(default=None, min_length=1)
    type: NotificationType | None = None
    published_at: UtcDateTime | None = None


class NotificationRead(CamelModel):
    """Representation of a notification as managed by administrators."""

    id: int
    title: str
    content: str
    type: NotificationType
    published_at: UtcDateTime
    created_at: UtcDateTime


class UserNotificationRead(NotificationRead):
    """A notification as delivered to one user."""

    is_read: bool
    read_at: UtcDateTime | None = None


class AdminNotificationRead(NotificationRead):
    read_rate: int
    total_recipients: int
    read_count: int


class AdminNotificationListResponse(CamelModel):
    notifications: list[AdminNotificationRead]
    pagination: PaginationRead


class UnreadCountRead(CamelModel):
    count: int


class MarkReadResponse(CamelModel):
    success: bool


class MarkAllReadResponse(CamelModel):
    success: bool
    count: int


__all__ = [
    "AdminNotificationListResponse",
    "AdminNotificationRead",
    "MarkAllReadResponse",
    "MarkReadResponse",
    "NotificationCreate",
    "NotificationRead",
    "NotificationUpdate",
    "UnreadCountRead",
    "UserNotificationRead",
]
