"""Use cases for a user's own notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from moptabi.domain.entities import UserNotification
from moptabi.domain.exceptions import NotFoundError
from moptabi.infrastructure.repositories import NotificationRepository
from moptabi.utils import utc_now

from .publish_notification import NOTIFICATION_NOT_FOUND


def list_user_notifications(session: Session, user_id: str) -> Sequence[UserNotification]:
    """Return the published notifications of ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(user_id, now=utc_now())


def count_unread_notifications(session: Session, user_id: str) -> int:
    return NotificationRepository(session).count_unread(user_id, now=utc_now())


def mark_notification_read(session: Session, user_id: str, notification_id: int) -> None:
    marked = NotificationRepository(session).mark_as_read(
        user_id, notification_id, read_at=utc_now()
    )
    if not marked:
        raise NotFoundError(NOTIFICATION_NOT_FOUND)


def mark_all_notifications_read(session: Session, user_id: str) -> int:
    """Mark every unread notification of ``user_id`` read and return how many changed."""

    return NotificationRepository(session).mark_all_as_read(user_id, read_at=utc_now())
