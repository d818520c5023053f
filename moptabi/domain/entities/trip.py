"""Domain entities describing a trip and its day-by-day itinerary."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .spot import Spot


class TransportNodeType(str, Enum):
    """Role of a node at either end of a :class:`Transport` edge."""

    DEPARTURE = "DEPARTURE"
    DESTINATION = "DESTINATION"
    SPOT = "SPOT"


@dataclass
class TripInfo:
    id: int | None
    trip_id: int | None
    date: str
    genre_id: int
    transportation_methods: list[int] = field(default_factory=list)
    memo: str | None = None


@dataclass
class Transport:
    """Travel leg between two plan spots or a sentinel node."""

    id: int | None
    plan_id: int | None
    from_type: TransportNodeType
    to_type: TransportNodeType
    transport_method: int
    travel_time: str | None = None
    cost: int | None = None
    from_spot_id: int | None = None
    to_spot_id: int | None = None


@dataclass
class PlanSpot:
    id: int | None
    plan_id: int | None
    spot_id: str
    stay_start: str
    stay_end: str
    order: int = 0
    memo: str | None = None
    spot: Spot | None = None


@dataclass
class Plan:
    """A single day of a trip."""

    id: int | None
    trip_id: int | None
    date: str
    plan_spots: list[PlanSpot] = field(default_factory=list)
    transports: list[Transport] = field(default_factory=list)


@dataclass
class Trip:
    id: int | None
    user_id: str
    title: str
    start_date: str
    end_date: str
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    trip_info: list[TripInfo] = field(default_factory=list)
    plans: list[Plan] = field(default_factory=list)


__all__ = ["Plan", "PlanSpot", "Transport", "TransportNodeType", "Trip", "TripInfo"]
