"""Pydantic models for trip payloads."""

from __future__ import annotations

from pydantic import Field, model_validator

from moptabi.domain.entities import TransportNodeType
from moptabi.domain.planning import DateKey

from .base import CamelModel, UtcDateTime
from .spot import OpeningHoursSchema, SpotDetailRead

TIME_PATTERN = r"^\d{2}:\d{2}$"


class LocationInput(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class TransportInput(CamelModel):
    transport_method_ids: list[int] = Field(..., min_length=1)
    travel_time: str | None = None
    cost: int | None = None
    from_type: TransportNodeType
    to_type: TransportNodeType


class NearestStationInput(CamelModel):
    name: str
    walking_time: int
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class TripSpotInput(CamelModel):
    """A spot placed on one day of the submitted trip."""

    id: str = Field(..., min_length=1, max_length=255)
    location: LocationInput
    stay_start: str = Field(..., pattern=TIME_PATTERN)
    stay_end: str = Field(..., pattern=TIME_PATTERN)
    memo: str | None = Field(default=None, max_length=1000)
    image: str | None = None
    url: str | None = None
    address: str | None = Field(default=None, max_length=255)
    prefecture: str | None = Field(default=None, max_length=50)
    rating: float | None = None
    category: list[str] = Field(default_factory=list)
    catchphrase: str | None = None
    description: str | None = None
    regular_opening_hours: list[OpeningHoursSchema] | None = None
    transports: TransportInput
    order: int = 0
    nearest_station: NearestStationInput | None = None


class TripPlanInput(CamelModel):
    date: str = Field(..., min_length=1, max_length=10)
    spots: list[TripSpotInput]


class TripInfoInput(CamelModel):
    date: str = Field(..., min_length=1, max_length=10)
    genre_id: int = 1
    transportation_method: list[int] = Field(..., min_length=1)
    memo: str | None = Field(default=None, max_length=1000)


class TripCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=50)
    image_url: str | None = Field(default=None, max_length=255)
    start_date: str = Field(..., min_length=1, max_length=10)
    end_date: str = Field(..., min_length=1, max_length=10)
    trip_info: list[TripInfoInput]
    plans: list[TripPlanInput]

    @model_validator(mode="after")
    def _date_range_ordered(self) -> "TripCreate":
        if DateKey.parse(self.start_date) > DateKey.parse(self.end_date):
            raise ValueError("endDate must not be before startDate")
        return self


class TripInfoRead(CamelModel):
    id: int
    trip_id: int
    date: str
    genre_id: int
    transportation_methods: list[int]
    memo: str | None = None


class TransportRead(CamelModel):
    id: int
    plan_id: int
    from_type: TransportNodeType
    to_type: TransportNodeType
    from_spot_id: int | None = None
    to_spot_id: int | None = None
    travel_time: str | None = None
    cost: int | None = None
    transport_method: int


class PlanSpotRead(CamelModel):
    id: int
    plan_id: int
    spot_id: str
    stay_start: str
    stay_end: str
    order: int
    memo: str | None = None
    spot: SpotDetailRead | None = None


class PlanRead(CamelModel):
    id: int
    trip_id: int
    date: str


class PlanDetailRead(PlanRead):
    plan_spots: list[PlanSpotRead]
    transports: list[TransportRead]


class TripRead(CamelModel):
    id: int
    user_id: str
    title: str
    image_url: str | None = None
    start_date: str
    end_date: str
    created_at: UtcDateTime
    updated_at: UtcDateTime
    trip_info: list[TripInfoRead]
    plans: list[PlanRead]


class TripDetailRead(TripRead):
    plans: list[PlanDetailRead]


class ImageUploadRead(CamelModel):
    file_name: str


class MessageResponse(CamelModel):
    message: str


__all__ = [
    "ImageUploadRead",
    "LocationInput",
    "MessageResponse",
    "NearestStationInput",
    "PlanDetailRead",
    "PlanRead",
    "PlanSpotRead",
    "TransportInput",
    "TransportRead",
    "TripCreate",
    "TripDetailRead",
    "TripInfoInput",
    "TripInfoRead",
    "TripPlanInput",
    "TripRead",
    "TripSpotInput",
]
