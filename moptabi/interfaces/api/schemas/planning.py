"""Pydantic models for itinerary drafts submitted for validation."""

from __future__ import annotations

from pydantic import Field, field_validator

from moptabi.domain.entities import TransportNodeType
from moptabi.domain.planning import DateKey

from .base import CamelModel


def _normalize_date(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return DateKey.parse(value).isoformat()


class DraftLocationInput(CamelModel):
    name: str = ""
    lat: float = 0.0
    lng: float = 0.0


class DraftTransportInput(CamelModel):
    transport_method_ids: list[int] = Field(default_factory=list)
    travel_time: str | None = None
    cost: int | None = None
    from_type: TransportNodeType = TransportNodeType.SPOT
    to_type: TransportNodeType = TransportNodeType.SPOT


class DraftSpotInput(CamelModel):
    id: str
    location: DraftLocationInput = Field(default_factory=DraftLocationInput)
    transports: DraftTransportInput | None = None
    order: int = 0
    stay_start: str | None = None
    stay_end: str | None = None
    memo: str | None = None
    image: str | None = None
    rating: float | None = None
    category: list[str] = Field(default_factory=list)


class DraftPlanInput(CamelModel):
    date: str
    spots: list[DraftSpotInput] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def _normalize_day(cls, value: str) -> str:
        return DateKey.parse(value).isoformat()


class DraftTripInfoInput(CamelModel):
    date: str
    genre_id: int = 0
    transportation_method: list[int] = Field(default_factory=list)
    memo: str = ""

    @field_validator("date")
    @classmethod
    def _normalize_day(cls, value: str) -> str:
        return DateKey.parse(value).isoformat()


class TripDraft(CamelModel):
    """Itinerary as edited in the plan builder, possibly incomplete."""

    title: str = ""
    image_url: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    trip_info: list[DraftTripInfoInput] = Field(default_factory=list)
    plans: list[DraftPlanInput] = Field(default_factory=list)

    @field_validator("start_date", "end_date")
    @classmethod
    def _normalize_range(cls, value: str | None) -> str | None:
        return _normalize_date(value)


class DraftValidationResult(CamelModel):
    is_error: bool
    errors: dict[str, str]
    trip_info_errors: dict[str, dict[str, str]]
    plan_errors: dict[str, dict[str, str]]
    spot_errors: dict[str, dict[str, str]]


__all__ = [
    "DraftLocationInput",
    "DraftPlanInput",
    "DraftSpotInput",
    "DraftTransportInput",
    "DraftTripInfoInput",
    "DraftValidationResult",
    "TripDraft",
]
