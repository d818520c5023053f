"""Use case returning the departures and destinations a user planned before."""

from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from moptabi.domain.entities.spot import DEPARTURE_SPOT_PREFIX
from moptabi.infrastructure.repositories import TripRepository


@dataclass(frozen=True)
class EndpointLocation:
    id: str
    name: str
    lat: float
    lng: float


@dataclass
class EndpointHistory:
    departure: list[EndpointLocation] = field(default_factory=list)
    destination: list[EndpointLocation] = field(default_factory=list)


def get_endpoint_history(session: Session, user_id: str) -> EndpointHistory:
    """Return the distinct (by name) departure and destination spots of ``user_id``."""

    history = EndpointHistory()
    seen: dict[str, set[str]] = {"departure": set(), "destination": set()}
    for plan_spot, _ in TripRepository(session).list_plan_spots(user_id, endpoints=True):
        meta = plan_spot.spot.meta if plan_spot.spot else None
        if meta is None:
            continue
        kind = "departure" if plan_spot.spot_id.startswith(DEPARTURE_SPOT_PREFIX) else "destination"
        if meta.name in seen[kind]:
            continue
        seen[kind].add(meta.name)
        getattr(history, kind).append(
            EndpointLocation(id=meta.id, name=meta.name, lat=meta.latitude, lng=meta.longitude)
        )
    return history
