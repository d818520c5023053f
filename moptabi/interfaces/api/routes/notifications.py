"""Endpoints for broadcast notifications and their per-user read state."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from moptabi.application.use_cases.notifications import (
    NotificationSortBy,
    count_unread_notifications,
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    list_admin_notifications as list_admin_notifications_uc,
    list_user_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    update_notification as update_notification_uc,
)
from moptabi.domain.entities import (
    Notification,
    NotificationReadStats,
    NotificationType,
    User,
    UserNotification,
)
from moptabi.domain.entities.pagination import DEFAULT_PAGE_LIMIT, clamp_limit
from moptabi.infrastructure.database import get_db
from moptabi.interfaces.api.dependencies import get_current_user_id, require_admin
from moptabi.interfaces.api.schemas import (
    AdminNotificationListResponse,
    AdminNotificationRead,
    MarkAllReadResponse,
    MarkReadResponse,
    NotificationCreate,
    NotificationRead,
    NotificationUpdate,
    PaginationRead,
    UnreadCountRead,
    UserNotificationRead,
)

router = APIRouter(prefix="/notification", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _user_notification_to_schema(item: UserNotification) -> UserNotificationRead:
    notification = item.notification
    return UserNotificationRead(
        id=notification.id,
        title=notification.title,
        content=notification.content,
        type=notification.type,
        published_at=notification.published_at,
        created_at=notification.created_at,
        is_read=item.is_read,
        read_at=item.read_at,
    )


def _stats_to_schema(stats: NotificationReadStats) -> AdminNotificationRead:
    notification = stats.notification
    return AdminNotificationRead(
        id=notification.id,
        title=notification.title,
        content=notification.content,
        type=notification.type,
        published_at=notification.published_at,
        created_at=notification.created_at,
        read_rate=stats.read_rate,
        total_recipients=stats.total_recipients,
        read_count=stats.read_count,
    )


@router.get("/admin", response_model=AdminNotificationListResponse)
def list_admin_notifications(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1),
    title: str | None = Query(None),
    notification_type: NotificationType | None = Query(None, alias="type"),
    published_from: date | None = Query(None, alias="publishedFrom"),
    published_to: date | None = Query(None, alias="publishedTo"),
    sort_by: NotificationSortBy = Query(NotificationSortBy.PUBLISHED_AT, alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder", pattern="^(asc|desc)$"),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> AdminNotificationListResponse:
    """Return every notification, including scheduled ones, with read statistics."""

    result = list_admin_notifications_uc(
        db,
        page=page,
        limit=clamp_limit(limit),
        title=title,
        notification_type=notification_type,
        published_from=published_from,
        published_to=published_to,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return AdminNotificationListResponse(
        notifications=[_stats_to_schema(item) for item in result.notifications],
        pagination=PaginationRead.model_validate(result.pagination),
    )


@router.get("/", response_model=list[UserNotificationRead])
def list_notifications(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> list[UserNotificationRead]:
    """Return the published notifications of the caller, newest first."""

    return [_user_notification_to_schema(item) for item in list_user_notifications(db, user_id)]


@router.get("/unread-count", response_model=UnreadCountRead)
def read_unread_count(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> UnreadCountRead:
    return UnreadCountRead(count=count_unread_notifications(db, user_id))


@router.patch("/read-all", response_model=MarkAllReadResponse)
def mark_all_read(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> MarkAllReadResponse:
    count = mark_all_notifications_read(db, user_id)
    return MarkAllReadResponse(success=True, count=count)


@router.patch("/{notification_id}/read", response_model=MarkReadResponse)
def mark_read(
    notification_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> MarkReadResponse:
    mark_notification_read(db, user_id, notification_id)
    return MarkReadResponse(success=True)


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> NotificationRead:
    """Publish a notification to every registered user."""

    notification = create_notification_uc(
        db,
        title=payload.title,
        content=payload.content,
        notification_type=payload.type,
        published_at=payload.published_at,
    )
    return _notification_to_schema(notification)


@router.patch("/{notification_id}", response_model=NotificationRead)
def update_notification(
    notification_id: int,
    payload: NotificationUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> NotificationRead:
    """Update a notification; every recipient sees it as unread again."""

    notification = update_notification_uc(
        db,
        notification_id,
        title=payload.title,
        content=payload.content,
        notification_type=payload.type,
        published_at=payload.published_at,
    )
    return _notification_to_schema(notification)


@router.delete("/{notification_id}", response_model=MarkReadResponse)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> MarkReadResponse:
    delete_notification_uc(db, notification_id)
    return MarkReadResponse(success=True)
