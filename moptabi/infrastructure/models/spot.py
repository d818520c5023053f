"""SQLAlchemy models for spots and the data displayed for them."""

from sqlalchemy import JSON, Column, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from moptabi.infrastructure.database import Base


class SpotModel(Base):
    """Identity row shared by wishlists and plan spots."""

    __tablename__ = "spot"

    id = Column(String(255), primary_key=True)

    meta = relationship(
        "SpotMetaModel",
        back_populates="spot",
        uselist=False,
        lazy="joined",
        cascade="all, delete-orphan",
    )
    nearest_stations = relationship(
        "NearestStationModel",
        back_populates="spot",
        order_by="NearestStationModel.id",
    )


class SpotMetaModel(Base):
    __tablename__ = "spot_meta"

    id = Column(String(255), primary_key=True)
    spot_id = Column(
        String(255),
        ForeignKey("spot.id", onupdate="CASCADE", ondelete="RESTRICT"),
        nullable=False,
        unique=True,
    )
    name = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    image = Column(Text, nullable=True)
    rating = Column(Float, nullable=True)
    categories = Column(JSON, nullable=True)
    catchphrase = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    opening_hours = Column(JSON, nullable=True)
    address = Column(String(255), nullable=True)
    prefecture = Column(String(50), nullable=True, index=True)
    url = Column(Text, nullable=True)

    spot = relationship("SpotModel", back_populates="meta")


class NearestStationModel(Base):
    __tablename__ = "nearest_station"

    id = Column(Integer, primary_key=True, index=True)
    spot_id = Column(
        String(255),
        ForeignKey("spot.id", onupdate="CASCADE", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name = Column(String(255), nullable=False)
    walking_time = Column(Integer, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    spot = relationship("SpotModel", back_populates="nearest_stations")


__all__ = ["NearestStationModel", "SpotMetaModel", "SpotModel"]
