"""In-memory itinerary draft edited before a trip is persisted.

The :class:`PlanningStore` keeps one bucket of spots per day and parallel
per-day error maps. Errors are recorded instead of raised so every problem in
a draft can be reported at once.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any

from .entities.trip import TransportNodeType

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})$")


@dataclass(frozen=True, order=True)
class DateKey:
    """Calendar day used to key every per-day map of the store."""

    value: date

    @classmethod
    def parse(cls, raw: str | date | DateKey) -> DateKey:
        """Build a key from ``YYYY-MM-DD``, ``YYYY/MM/DD`` or a :class:`date`."""

        if isinstance(raw, DateKey):
            return raw
        if isinstance(raw, date):
            return cls(raw)
        match = _DATE_PATTERN.match(raw.strip())
        if match is None:
            raise ValueError(f"Invalid date: {raw!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(date(year, month, day))

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.isoformat()


@dataclass
class DraftLocation:
    name: str
    lat: float
    lng: float


@dataclass
class DraftTransport:
    transport_method_ids: list[int]
    from_type: TransportNodeType = TransportNodeType.SPOT
    to_type: TransportNodeType = TransportNodeType.SPOT
    travel_time: str | None = None
    cost: int | None = None


@dataclass
class DraftSpot:
    """A spot placed on a day of the draft itinerary."""

    id: str
    location: DraftLocation
    transports: DraftTransport | None = None
    order: int = 0
    stay_start: str | None = None
    stay_end: str | None = None
    memo: str | None = None
    image: str | None = None
    rating: float | None = None
    category: list[str] = field(default_factory=list)

    def has_node_types(
        self, *, from_type: TransportNodeType | None = None, to_type: TransportNodeType | None = None
    ) -> bool:
        if self.transports is None:
            return False
        if from_type is not None and self.transports.from_type != from_type:
            return False
        if to_type is not None and self.transports.to_type != to_type:
            return False
        return True


@dataclass
class DayPlan:
    date: DateKey
    spots: list[DraftSpot] = field(default_factory=list)


@dataclass
class DraftTripInfo:
    date: DateKey
    genre_id: int = 0
    transportation_method: list[int] = field(default_factory=list)
    memo: str = ""


@dataclass
class SpotCoordination:
    departure: DraftSpot | None
    destination: DraftSpot | None
    spots: list[DraftSpot]


_TRIP_INFO_FIELDS = {
    "genreId": "genre_id",
    "genre_id": "genre_id",
    "transportationMethod": "transportation_method",
    "transportation_method": "transportation_method",
    "memo": "memo",
}


class PlanningStore:
    """Draft of a multi-day trip and the validation errors attached to it."""

    def __init__(self) -> None:
        self.title: str = ""
        self.image_url: str | None = None
        self.start_date: DateKey | None = None
        self.end_date: DateKey | None = None
        self.trip_info: list[DraftTripInfo] = []
        self.plans: list[DayPlan] = []
        self.simulation_status: dict[DateKey, int] | None = None
        self.errors: dict[str, str] = {}
        self.trip_info_errors: dict[DateKey, dict[str, str]] = {}
        self.plan_errors: dict[DateKey, dict[str, str]] = {}
        self.spot_errors: dict[DateKey, dict[str, str]] = {}

    def get_plan(self, day: str | date | DateKey) -> DayPlan | None:
        key = DateKey.parse(day)
        return next((plan for plan in self.plans if plan.date == key), None)

    def set_spots(self, day: str | date | DateKey, spot: DraftSpot, is_deleted: bool = False) -> None:
        """Insert, replace (matched by id) or remove ``spot`` on ``day``."""

        key = DateKey.parse(day)
        plan = self.get_plan(key)
        if plan is None:
            self.plans.append(DayPlan(date=key, spots=[spot]))
            return

        index = next((i for i, item in enumerate(plan.spots) if item.id == spot.id), None)
        if index is not None and not is_deleted:
            plan.spots[index] = spot
        elif index is not None:
            del plan.spots[index]
        elif not is_deleted:
            plan.spots.append(spot)

    def edit_spots(self, day: str | date | DateKey, spot_id: str, **changes: Any) -> None:
        key = DateKey.parse(day)
        plan = self.get_plan(key)
        if plan is None:
            logger.warning("No plans found for date %s", key)
            return
        for index, spot in enumerate(plan.spots):
            if spot.id == spot_id:
                plan.spots[index] = replace(spot, **changes)
                return
        logger.warning("Spot with id %s not found in plans for date %s", spot_id, key)

    def get_spot_info(self, day: str | date | DateKey, node_type: TransportNodeType) -> list[DraftSpot]:
        """Return the spots of ``day`` playing the ``node_type`` role.

        Plain spots are returned sorted by ``order``.
        """

        plan = self.get_plan(day)
        if plan is None:
            return []
        if node_type == TransportNodeType.DEPARTURE:
            return [spot for spot in plan.spots if spot.has_node_types(from_type=node_type)]
        if node_type == TransportNodeType.DESTINATION:
            return [spot for spot in plan.spots if spot.has_node_types(to_type=node_type)]
        spots = [
            spot
            for spot in plan.spots
            if spot.has_node_types(from_type=node_type, to_type=node_type)
        ]
        return sorted(spots, key=lambda spot: spot.order)

    def get_spot_coordination(self, day: str | date | DateKey) -> SpotCoordination | None:
        plan = self.get_plan(day)
        if plan is None:
            return None
        departure = next(
            (s for s in plan.spots if s.has_node_types(from_type=TransportNodeType.DEPARTURE)),
            None,
        )
        destination = next(
            (s for s in plan.spots if s.has_node_types(to_type=TransportNodeType.DESTINATION)),
            None,
        )
        spots = [
            s
            for s in plan.spots
            if s.has_node_types(from_type=TransportNodeType.SPOT, to_type=TransportNodeType.SPOT)
        ]
        return SpotCoordination(departure=departure, destination=destination, spots=spots)

    def get_trip_info(self, day: str | date | DateKey) -> DraftTripInfo | None:
        key = DateKey.parse(day)
        return next((info for info in self.trip_info if info.date == key), None)

    def set_trip_info(self, day: str | date | DateKey, name: str, value: Any) -> None:
        attribute = _TRIP_INFO_FIELDS.get(name)
        if attribute is None:
            raise ValueError(f"Unknown trip info field: {name}")
        key = DateKey.parse(day)
        info = self.get_trip_info(key)
        if info is None:
            info = DraftTripInfo(date=key)
            self.trip_info.append(info)
        if attribute == "genre_id":
            value = int(value)
        elif attribute == "transportation_method":
            value = list(value)
        setattr(info, attribute, value)

    def set_simulation_status(self, day: str | date | DateKey, status: int) -> None:
        if self.simulation_status is None:
            self.simulation_status = {}
        self.simulation_status[DateKey.parse(day)] = status

    def set_range_date(
        self, start: str | date | DateKey | None, end: str | date | DateKey | None
    ) -> None:
        self.start_date = DateKey.parse(start) if start else None
        self.end_date = DateKey.parse(end) if end else None

    def set_errors(self, errors: dict[str, str]) -> None:
        self.errors.update(errors)

    def set_trip_info_errors(self, day: str | date | DateKey, errors: dict[str, str]) -> None:
        self.trip_info_errors.setdefault(DateKey.parse(day), {}).update(errors)

    def set_plan_errors(self, day: str | date | DateKey, errors: dict[str, str]) -> None:
        self.plan_errors.setdefault(DateKey.parse(day), {}).update(errors)

    def set_spot_errors(self, day: str | date | DateKey, errors: dict[str, str]) -> None:
        self.spot_errors.setdefault(DateKey.parse(day), {}).update(errors)

    def reset_errors(self) -> None:
        """Clear the per-day error maps, keeping form level errors."""

        self.trip_info_errors = {}
        self.plan_errors = {}
        self.spot_errors = {}

    def reset_form(self) -> None:
        self.errors = {}

    def has_errors(self) -> bool:
        return any(
            (
                self.errors,
                any(self.trip_info_errors.values()),
                any(self.plan_errors.values()),
                any(self.spot_errors.values()),
            )
        )


__all__ = [
    "DateKey",
    "DayPlan",
    "DraftLocation",
    "DraftSpot",
    "DraftTransport",
    "DraftTripInfo",
    "PlanningStore",
    "SpotCoordination",
]
