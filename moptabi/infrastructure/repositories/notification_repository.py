"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import Integer, asc, case, cast, desc, func
from sqlalchemy.orm import Query, Session

from moptabi.domain.entities import Notification, NotificationType, UserNotification
from moptabi.infrastructure.models import NotificationModel, UserNotificationModel

NOTIFICATION_SORT_COLUMNS = {
    "publishedAt": NotificationModel.published_at,
    "createdAt": NotificationModel.created_at,
}


class NotificationRepository:
    """Provide CRUD operations for notifications and their recipients."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def add(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification, include_creation_fields=True)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def apply_update(self, notification: Notification) -> Notification:
        if notification.id is None:
            raise ValueError("Notification id is required for updates")
        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            msg = f"Notification with id {notification.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, notification, include_creation_fields=False)
        self.session.flush()
        return self._to_entity(model)

    def remove(self, notification_id: int) -> None:
        self.session.query(UserNotificationModel).filter(
            UserNotificationModel.notification_id == notification_id
        ).delete(synchronize_session=False)
        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id
        ).delete(synchronize_session=False)
        self.session.flush()

    def fan_out(self, notification_id: int, user_ids: Iterable[str]) -> int:
        """Ensure every user in ``user_ids`` has an unread row for the notification.

        Existing rows are reset to unread. Returns the number of rows created.
        """

        self.session.query(UserNotificationModel).filter(
            UserNotificationModel.notification_id == notification_id
        ).update(
            {UserNotificationModel.is_read: False, UserNotificationModel.read_at: None},
            synchronize_session=False,
        )
        existing = {
            user_id
            for (user_id,) in self.session.query(UserNotificationModel.user_id).filter(
                UserNotificationModel.notification_id == notification_id
            )
        }
        missing = [user_id for user_id in dict.fromkeys(user_ids) if user_id not in existing]
        self.session.add_all(
            UserNotificationModel(user_id=user_id, notification_id=notification_id, is_read=False)
            for user_id in missing
        )
        self.session.flush()
        return len(missing)

    def list_for_user(self, user_id: str, *, now: datetime) -> Sequence[UserNotification]:
        query = (
            self._published_for_user(user_id, now)
            .order_by(NotificationModel.published_at.desc(), NotificationModel.id.desc())
        )
        return [self._user_notification_to_entity(model) for model in query.all()]

    def count_unread(self, user_id: str, *, now: datetime) -> int:
        return (
            self._published_for_user(user_id, now)
            .filter(UserNotificationModel.is_read.is_(False))
            .count()
        )

    def mark_as_read(self, user_id: str, notification_id: int, *, read_at: datetime) -> bool:
        model = (
            self.session.query(UserNotificationModel)
            .filter(
                UserNotificationModel.user_id == user_id,
                UserNotificationModel.notification_id == notification_id,
            )
            .first()
        )
        if model is None:
            return False
        model.is_read = True
        model.read_at = read_at
        self.session.commit()
        return True

    def mark_all_as_read(self, user_id: str, *, read_at: datetime) -> int:
        count = (
            self.session.query(UserNotificationModel)
            .filter(
                UserNotificationModel.user_id == user_id,
                UserNotificationModel.is_read.is_(False),
            )
            .update(
                {UserNotificationModel.is_read: True, UserNotificationModel.read_at: read_at},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return count

    def filtered_query(
        self,
        *,
        title: str | None = None,
        notification_type: NotificationType | None = None,
        published_from: datetime | None = None,
        published_to: datetime | None = None,
    ) -> Query:
        query = self.session.query(NotificationModel)
        if title:
            query = query.filter(
                func.lower(NotificationModel.title).contains(title.lower(), autoescape=True)
            )
        if notification_type is not None:
            query = query.filter(NotificationModel.type == notification_type)
        if published_from is not None:
            query = query.filter(NotificationModel.published_at >= published_from)
        if published_to is not None:
            query = query.filter(NotificationModel.published_at <= published_to)
        return query

    def list_page(
        self, query: Query, *, sort_by: str, sort_order: str, offset: int, limit: int
    ) -> Sequence[Notification]:
        column = NOTIFICATION_SORT_COLUMNS[sort_by]
        direction = asc if sort_order == "asc" else desc
        query = query.order_by(direction(column), direction(NotificationModel.id))
        return [self._to_entity(model) for model in query.offset(offset).limit(limit).all()]

    def list_page_by_read_rate(
        self, query: Query, *, sort_order: str, offset: int, limit: int
    ) -> list[tuple[Notification, int, int]]:
        """Return ``(notification, total_recipients, read_count)`` rows ordered by read rate.

        The rate is computed in SQL with the same half-up rounding as
        :func:`compute_read_rate` so the whole filtered set is
        ordered before the page window is applied.
        """

        counts = (
            self.session.query(
                UserNotificationModel.notification_id.label("notification_id"),
                func.count(UserNotificationModel.id).label("total"),
                func.sum(case((UserNotificationModel.is_read.is_(True), 1), else_=0)).label(
                    "read_count"
                ),
            )
            .group_by(UserNotificationModel.notification_id)
            .subquery()
        )
        total = cast(func.coalesce(counts.c.total, 0), Integer)
        read = cast(func.coalesce(counts.c.read_count, 0), Integer)
        read_rate = case((total == 0, 0), else_=(read * 200 + total) // (total * 2))

        direction = asc if sort_order == "asc" else desc
        rows = (
            query.outerjoin(counts, counts.c.notification_id == NotificationModel.id)
            .add_columns(total, read)
            .order_by(direction(read_rate), NotificationModel.id.asc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return [
            (self._to_entity(model), int(total_recipients), int(read_count))
            for model, total_recipients, read_count in rows
        ]

    def read_counts(self, notification_ids: Sequence[int]) -> dict[int, tuple[int, int]]:
        """Return ``{notification_id: (total_recipients, read_count)}``."""

        if not notification_ids:
            return {}
        rows = (
            self.session.query(
                UserNotificationModel.notification_id,
                func.count(UserNotificationModel.id),
                func.sum(case((UserNotificationModel.is_read.is_(True), 1), else_=0)),
            )
            .filter(UserNotificationModel.notification_id.in_(set(notification_ids)))
            .group_by(UserNotificationModel.notification_id)
            .all()
        )
        return {
            notification_id: (int(total or 0), int(read or 0))
            for notification_id, total, read in rows
        }

    def _published_for_user(self, user_id: str, now: datetime) -> Query:
        return (
            self.session.query(UserNotificationModel)
            .join(NotificationModel, NotificationModel.id == UserNotificationModel.notification_id)
            .filter(UserNotificationModel.user_id == user_id)
            .filter(NotificationModel.published_at <= now)
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            title=model.title,
            content=model.content,
            type=model.type,
            published_at=model.published_at,
            created_at=model.created_at,
        )

    @staticmethod
    def _user_notification_to_entity(model: UserNotificationModel) -> UserNotification:
        return UserNotification(
            id=model.id,
            user_id=model.user_id,
            notification_id=model.notification_id,
            is_read=model.is_read,
            read_at=model.read_at,
            created_at=model.created_at,
            notification=NotificationRepository._to_entity(model.notification),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel,
        notification: Notification,
        *,
        include_creation_fields: bool,
    ) -> None:
        if include_creation_fields and notification.created_at is not None:
            model.created_at = notification.created_at
        model.title = notification.title
        model.content = notification.content
        model.type = notification.type
        model.published_at = notification.published_at
