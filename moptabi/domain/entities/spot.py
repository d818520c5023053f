"""Domain entities describing places a user can visit."""

from __future__ import annotations

from dataclasses import dataclass, field

DEPARTURE_SPOT_PREFIX = "departure"
DESTINATION_SPOT_PREFIX = "destination"


def is_endpoint_spot_id(spot_id: str) -> bool:
    """Return ``True`` for the sentinel spots used as a day's departure or destination."""

    return spot_id.startswith(DEPARTURE_SPOT_PREFIX) or spot_id.startswith(
        DESTINATION_SPOT_PREFIX
    )


@dataclass
class OpeningHours:
    day: str
    hours: str


@dataclass
class SpotMeta:
    """Display data attached one-to-one to a :class:`Spot`."""

    id: str
    spot_id: str
    name: str
    latitude: float
    longitude: float
    image: str | None = None
    rating: float | None = None
    categories: list[str] = field(default_factory=list)
    catchphrase: str | None = None
    description: str | None = None
    opening_hours: list[OpeningHours] | None = None
    address: str | None = None
    prefecture: str | None = None
    url: str | None = None


@dataclass
class NearestStation:
    id: int | None
    spot_id: str | None
    name: str
    walking_time: int
    latitude: float
    longitude: float


@dataclass
class Spot:
    id: str
    meta: SpotMeta | None = None
    nearest_stations: list[NearestStation] = field(default_factory=list)


__all__ = [
    "DEPARTURE_SPOT_PREFIX",
    "DESTINATION_SPOT_PREFIX",
    "NearestStation",
    "OpeningHours",
    "Spot",
    "SpotMeta",
    "is_endpoint_spot_id",
]
