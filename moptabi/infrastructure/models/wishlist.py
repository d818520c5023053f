"""SQLAlchemy model for wishlist entries."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from moptabi.infrastructure.database import Base
from moptabi.utils import utc_now


class WishlistModel(Base):
    """A spot a user wants to visit, at most once per (user, spot)."""

    __tablename__ = "wishlist"
    __table_args__ = (
        UniqueConstraint("user_id", "spot_id", name="uq_wishlist_user_spot"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        String(255),
        ForeignKey("user.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    spot_id = Column(
        String(255),
        ForeignKey("spot.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    memo = Column(Text, nullable=True)
    priority = Column(Integer, nullable=False, default=1)
    visited = Column(Integer, nullable=False, default=0)
    visited_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    user = relationship("UserModel", back_populates="wishlists")
    spot = relationship("SpotModel", lazy="joined")


__all__ = ["WishlistModel"]
