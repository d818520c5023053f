"""SQLAlchemy models for published notifications and per-user read state."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from moptabi.domain.entities import NotificationType
from moptabi.infrastructure.database import Base
from moptabi.utils import utc_now


class NotificationModel(Base):
    """Database representation of a notification broadcast to all users."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    type = Column(Enum(NotificationType, name="notification_type"), nullable=False)
    published_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    recipients = relationship(
        "UserNotificationModel",
        back_populates="notification",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserNotificationModel(Base):
    __tablename__ = "user_notification"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "notification_id", name="uq_user_notification_user_notification"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        String(255),
        ForeignKey("user.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    notification_id = Column(
        Integer,
        ForeignKey("notification.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_read = Column(Boolean, nullable=False, default=False)
    read_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    user = relationship("UserModel", back_populates="notifications")
    notification = relationship("NotificationModel", back_populates="recipients", lazy="joined")


__all__ = ["NotificationModel", "UserNotificationModel"]
