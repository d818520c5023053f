"""Use cases for creating, updating and deleting broadcast notifications."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from moptabi.domain.entities import Notification, NotificationType
from moptabi.domain.exceptions import NotFoundError
from moptabi.infrastructure.repositories import NotificationRepository, UserRepository
from moptabi.utils import ensure_naive_utc, utc_now

logger = logging.getLogger(__name__)

NOTIFICATION_NOT_FOUND = "Notification not found"


def create_notification(
    session: Session,
    *,
    title: str,
    content: str,
    notification_type: NotificationType,
    published_at: datetime,
) -> Notification:
    """Persist a notification and one unread row per existing user atomically."""

    repository = NotificationRepository(session)
    try:
        notification = repository.add(
            Notification(
                id=None,
                title=title,
                content=content,
                type=notification_type,
                published_at=ensure_naive_utc(published_at),
                created_at=utc_now(),
            )
        )
        created = repository.fan_out(notification.id, UserRepository(session).list_ids())
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info("Notification %s published to %d users", notification.id, created)
    return notification


def update_notification(
    session: Session,
    notification_id: int,
    *,
    title: str | None = None,
    content: str | None = None,
    notification_type: NotificationType | None = None,
    published_at: datetime | None = None,
) -> Notification:
    """Update a notification and mark it unread again for every user."""

    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError(NOTIFICATION_NOT_FOUND)

    if title is not None:
        notification.title = title
    if content is not None:
        notification.content = content
    if notification_type is not None:
        notification.type = notification_type
    if published_at is not None:
        notification.published_at = ensure_naive_utc(published_at)

    try:
        updated = repository.apply_update(notification)
        created = repository.fan_out(notification_id, UserRepository(session).list_ids())
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(
        "Notification %s republished; %d recipient rows created", notification_id, created
    )
    return updated


def delete_notification(session: Session, notification_id: int) -> None:
    repository = NotificationRepository(session)
    if repository.get(notification_id) is None:
        raise NotFoundError(NOTIFICATION_NOT_FOUND)
    try:
        repository.remove(notification_id)
        session.commit()
    except Exception:
        session.rollback()
        raise
