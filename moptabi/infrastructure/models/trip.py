"""SQLAlchemy models for trips and their day plans."""

from sqlalchemy import JSON, Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from moptabi.domain.entities import TransportNodeType
from moptabi.infrastructure.database import Base
from moptabi.utils import utc_now


class TripModel(Base):
    """Database representation of a multi-day trip owned by a user."""

    __tablename__ = "trip"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(50), nullable=False)
    user_id = Column(
        String(255),
        ForeignKey("user.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url = Column(String(255), nullable=True)
    start_date = Column(String(10), nullable=False)
    end_date = Column(String(10), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    user = relationship("UserModel", back_populates="trips")
    trip_info = relationship(
        "TripInfoModel",
        back_populates="trip",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TripInfoModel.id",
    )
    plans = relationship(
        "PlanModel",
        back_populates="trip",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PlanModel.id",
    )


class TripInfoModel(Base):
    __tablename__ = "trip_info"

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(
        Integer,
        ForeignKey("trip.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date = Column(String(10), nullable=False)
    genre_id = Column(Integer, nullable=False)
    transportation_methods = Column(JSON, nullable=False, default=list)
    memo = Column(Text, nullable=True)

    trip = relationship("TripModel", back_populates="trip_info")


class PlanModel(Base):
    """One day of a trip."""

    __tablename__ = "plan"

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(
        Integer,
        ForeignKey("trip.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date = Column(String(10), nullable=False)

    trip = relationship("TripModel", back_populates="plans")
    plan_spots = relationship(
        "PlanSpotModel",
        back_populates="plan",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PlanSpotModel.order",
    )
    transports = relationship(
        "TransportModel",
        back_populates="plan",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TransportModel.id",
    )


class PlanSpotModel(Base):
    __tablename__ = "plan_spot"

    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(
        Integer,
        ForeignKey("plan.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    spot_id = Column(
        String(255),
        ForeignKey("spot.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    stay_start = Column(String(5), nullable=False)
    stay_end = Column(String(5), nullable=False)
    order = Column("order", Integer, nullable=False, default=0)
    memo = Column(Text, nullable=True)

    plan = relationship("PlanModel", back_populates="plan_spots")
    spot = relationship("SpotModel", lazy="joined")


class TransportModel(Base):
    """Travel leg between two plan spots or a day's departure/destination."""

    __tablename__ = "transport"

    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(
        Integer,
        ForeignKey("plan.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    from_type = Column(Enum(TransportNodeType, name="transport_node_type"), nullable=False)
    to_type = Column(Enum(TransportNodeType, name="transport_node_type"), nullable=False)
    from_spot_id = Column(
        Integer,
        ForeignKey("plan_spot.id", onupdate="CASCADE", ondelete="SET NULL"),
        nullable=True,
    )
    to_spot_id = Column(
        Integer,
        ForeignKey("plan_spot.id", onupdate="CASCADE", ondelete="SET NULL"),
        nullable=True,
    )
    travel_time = Column(Text, nullable=True)
    cost = Column(Integer, nullable=True)
    transport_method = Column(Integer, nullable=False)

    plan = relationship("PlanModel", back_populates="transports")


__all__ = [
    "PlanModel",
    "PlanSpotModel",
    "TransportModel",
    "TripInfoModel",
    "TripModel",
]
