"""Use cases for reading and deleting trips."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from moptabi.domain.entities import Trip
from moptabi.domain.exceptions import NotFoundError
from moptabi.domain.limits import MAX_PLANS
from moptabi.infrastructure.repositories import TripRepository

TRIP_NOT_FOUND = "No trip found"


@dataclass(frozen=True)
class TripCount:
    count: int
    limit: int = MAX_PLANS


def list_trips(session: Session, user_id: str) -> Sequence[Trip]:
    return TripRepository(session).list_for_user(user_id)


def count_trips(session: Session, user_id: str) -> TripCount:
    return TripCount(count=TripRepository(session).count_for_user(user_id))


def get_trip(session: Session, *, user_id: str, trip_id: int) -> Trip:
    """Return the trip with its plans, ordered plan spots and spot details."""

    trip = TripRepository(session).get_for_user(trip_id, user_id)
    if trip is None:
        raise NotFoundError(TRIP_NOT_FOUND)
    return trip


def delete_trip(session: Session, *, user_id: str, trip_id: int) -> None:
    repository = TripRepository(session)
    if repository.get_for_user(trip_id, user_id) is None:
        raise NotFoundError(TRIP_NOT_FOUND)
    repository.delete(trip_id)
