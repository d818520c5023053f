"""Use case for the administrative notification listing with read rates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from sqlalchemy.orm import Session

from moptabi.domain.entities import (
    NotificationReadStats,
    NotificationType,
    PaginationInfo,
    calculate_pagination,
)
from moptabi.domain.entities.pagination import page_offset
from moptabi.infrastructure.repositories import NotificationRepository
from moptabi.utils import end_of_day, start_of_day


class NotificationSortBy(str, Enum):
    PUBLISHED_AT = "publishedAt"
    CREATED_AT = "createdAt"
    READ_RATE = "readRate"


@dataclass
class NotificationListPage:
    notifications: list[NotificationReadStats]
    pagination: PaginationInfo


def list_admin_notifications(
    session: Session,
    *,
    page: int,
    limit: int,
    title: str | None = None,
    notification_type: NotificationType | None = None,
    published_from: date | None = None,
    published_to: date | None = None,
    sort_by: NotificationSortBy = NotificationSortBy.PUBLISHED_AT,
    sort_order: str = "desc",
) -> NotificationListPage:
    """Return one page of notifications annotated with recipient read counts.

    Stored columns are sorted by the database. The read rate is not stored, so
    sorting by it ranks the whole filtered set on the computed rate before the
    page window is applied.
    """

    repository = NotificationRepository(session)
    query = repository.filtered_query(
        title=title,
        notification_type=notification_type,
        published_from=start_of_day(published_from) if published_from else None,
        published_to=end_of_day(published_to) if published_to else None,
    )
    total_count = query.count()
    offset = page_offset(page, limit)

    if sort_by == NotificationSortBy.READ_RATE:
        rows = repository.list_page_by_read_rate(
            query, sort_order=sort_order, offset=offset, limit=limit
        )
        page_items = [
            NotificationReadStats(
                notification=notification, total_recipients=total, read_count=read
            )
            for notification, total, read in rows
        ]
    else:
        notifications = repository.list_page(
            query,
            sort_by=sort_by.value,
            sort_order=sort_order,
            offset=offset,
            limit=limit,
        )
        page_items = _with_read_counts(repository, notifications)

    return NotificationListPage(
        notifications=page_items,
        pagination=calculate_pagination(total_count, page, limit),
    )


def _with_read_counts(repository, notifications) -> list[NotificationReadStats]:
    counts = repository.read_counts([notification.id for notification in notifications])
    stats = []
    for notification in notifications:
        total, read = counts.get(notification.id, (0, 0))
        stats.append(
            NotificationReadStats(
                notification=notification, total_recipients=total, read_count=read
            )
        )
    return stats
