"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Enum, String
from sqlalchemy.orm import relationship

from moptabi.domain.entities import RoleType
from moptabi.infrastructure.database import Base
from moptabi.utils import utc_now


class UserModel(Base):
    """Database representation of a user registered through the identity provider."""

    __tablename__ = "user"

    id = Column(String(255), primary_key=True)
    role = Column(
        Enum(RoleType, name="role_type"),
        nullable=False,
        default=RoleType.USER,
    )
    email = Column(String(255), nullable=True)
    name = Column(String(255), nullable=True)
    image = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    last_login_at = Column(DateTime, nullable=True)

    trips = relationship(
        "TripModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    wishlists = relationship(
        "WishlistModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    notifications = relationship(
        "UserNotificationModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["UserModel"]
