"""Pydantic models describing spots and their display data."""

from __future__ import annotations

from pydantic import Field

from moptabi.domain.entities import OpeningHours, Spot, SpotMeta

from .base import CamelModel


class OpeningHoursSchema(CamelModel):
    day: str
    hours: str


class SpotMetaBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    image: str | None = None
    rating: float | None = None
    categories: list[str] = Field(default_factory=list)
    catchphrase: str | None = None
    description: str | None = None
    opening_hours: list[OpeningHoursSchema] | None = None
    address: str | None = Field(default=None, max_length=255)
    prefecture: str | None = Field(default=None, max_length=50)
    url: str | None = None


class SpotMetaInput(SpotMetaBase):
    """Metadata supplied by the client when a spot is registered."""

    id: str | None = None


class SpotInput(CamelModel):
    id: str = Field(..., min_length=1, max_length=255)
    meta: SpotMetaInput

    def to_entity(self) -> Spot:
        meta = self.meta
        return Spot(
            id=self.id,
            meta=SpotMeta(
                id=meta.id or self.id,
                spot_id=self.id,
                name=meta.name,
                latitude=meta.latitude,
                longitude=meta.longitude,
                image=meta.image,
                rating=meta.rating,
                categories=list(meta.categories),
                catchphrase=meta.catchphrase,
                description=meta.description,
                opening_hours=(
                    [OpeningHours(day=item.day, hours=item.hours) for item in meta.opening_hours]
                    if meta.opening_hours is not None
                    else None
                ),
                address=meta.address,
                prefecture=meta.prefecture,
                url=meta.url,
            ),
        )


class SpotMetaRead(SpotMetaBase):
    id: str
    spot_id: str


class NearestStationRead(CamelModel):
    id: int
    spot_id: str | None = None
    name: str
    walking_time: int
    latitude: float
    longitude: float


class SpotRead(CamelModel):
    id: str
    meta: SpotMetaRead | None = None


class SpotDetailRead(SpotRead):
    nearest_stations: list[NearestStationRead] = Field(default_factory=list)


class EndpointLocationRead(CamelModel):
    id: str
    name: str
    lat: float
    lng: float


class EndpointHistoryRead(CamelModel):
    departure: list[EndpointLocationRead]
    destination: list[EndpointLocationRead]


__all__ = [
    "EndpointHistoryRead",
    "EndpointLocationRead",
    "NearestStationRead",
    "OpeningHoursSchema",
    "SpotDetailRead",
    "SpotInput",
    "SpotMetaInput",
    "SpotMetaRead",
    "SpotRead",
]
