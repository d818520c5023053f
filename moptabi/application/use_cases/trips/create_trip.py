"""Use case for creating a trip with its day plans in a single transaction."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from moptabi.domain.entities import PlanSpot, Spot, Transport, TransportNodeType, Trip, TripInfo
from moptabi.domain.exceptions import LimitExceededError
from moptabi.domain.limits import (
    MAX_PLAN_DAYS,
    MAX_SPOTS_PER_DAY,
    LimitType,
    get_limit_error_message,
    is_plan_limit_reached,
)
from moptabi.infrastructure.repositories import SpotRepository, TripRepository

from .manage_trips import get_trip

logger = logging.getLogger(__name__)

DEFAULT_TRAVEL_TIME = "不明"
DEPARTURE_TRAVEL_TIME = "出発"
DESTINATION_TRAVEL_TIME = "帰宅"
ENDPOINT_TRANSPORT_METHOD = 1


@dataclass
class PlanSpotInput:
    """A spot of a day plan together with the leg that leaves it."""

    spot: Spot
    stay_start: str
    stay_end: str
    transport_method_ids: list[int]
    order: int = 0
    memo: str | None = None
    travel_time: str | None = None
    cost: int | None = None


@dataclass
class PlanInput:
    date: str
    spots: list[PlanSpotInput] = field(default_factory=list)


def _check_limits(trip_repository: TripRepository, user_id: str, plans: list[PlanInput]) -> None:
    current = trip_repository.count_for_user(user_id)
    if is_plan_limit_reached(current):
        raise LimitExceededError(get_limit_error_message(LimitType.PLAN))
    if len(plans) > MAX_PLAN_DAYS:
        raise LimitExceededError(get_limit_error_message(LimitType.PLAN_DAYS))
    if any(len(plan.spots) > MAX_SPOTS_PER_DAY for plan in plans):
        raise LimitExceededError(get_limit_error_message(LimitType.SPOTS_PER_DAY))


def _register_missing_spots(spot_repository: SpotRepository, plans: list[PlanInput]) -> int:
    candidates: dict[str, Spot] = {}
    for plan in plans:
        for item in plan.spots:
            candidates.setdefault(item.spot.id, item.spot)
    existing = spot_repository.existing_ids(candidates)
    missing = [spot for spot_id, spot in candidates.items() if spot_id not in existing]
    for spot in missing:
        spot_repository.add(spot)
    return len(missing)


def _add_plan(trip_repository: TripRepository, trip_id: int, plan: PlanInput) -> None:
    plan_id = trip_repository.add_plan(trip_id, plan.date)
    plan_spot_ids = [
        trip_repository.add_plan_spot(
            PlanSpot(
                id=None,
                plan_id=plan_id,
                spot_id=item.spot.id,
                stay_start=item.stay_start,
                stay_end=item.stay_end,
                order=item.order,
                memo=item.memo,
            )
        )
        for item in plan.spots
    ]
    if not plan_spot_ids:
        return

    for index, item in enumerate(plan.spots[:-1]):
        trip_repository.add_transport(
            Transport(
                id=None,
                plan_id=plan_id,
                from_type=TransportNodeType.SPOT,
                to_type=TransportNodeType.SPOT,
                from_spot_id=plan_spot_ids[index],
                to_spot_id=plan_spot_ids[index + 1],
                transport_method=item.transport_method_ids[0],
                travel_time=item.travel_time or DEFAULT_TRAVEL_TIME,
                cost=item.cost if item.cost is not None else 0,
            )
        )
    trip_repository.add_transport(
        Transport(
            id=None,
            plan_id=plan_id,
            from_type=TransportNodeType.DEPARTURE,
            to_type=TransportNodeType.SPOT,
            to_spot_id=plan_spot_ids[0],
            transport_method=ENDPOINT_TRANSPORT_METHOD,
            travel_time=DEPARTURE_TRAVEL_TIME,
            cost=0,
        )
    )
    trip_repository.add_transport(
        Transport(
            id=None,
            plan_id=plan_id,
            from_type=TransportNodeType.SPOT,
            to_type=TransportNodeType.DESTINATION,
            from_spot_id=plan_spot_ids[-1],
            transport_method=ENDPOINT_TRANSPORT_METHOD,
            travel_time=DESTINATION_TRAVEL_TIME,
            cost=0,
        )
    )


def create_trip(
    session: Session,
    *,
    user_id: str,
    title: str,
    start_date: str,
    end_date: str,
    trip_info: list[TripInfo],
    plans: list[PlanInput],
    image_url: str | None = None,
) -> Trip:
    """Create a trip, its day plans, plan spots and transports.

    Limits are enforced before any write. Unknown spots are registered in the
    same transaction as the trip.
    """

    trip_repository = TripRepository(session)
    try:
        _check_limits(trip_repository, user_id, plans)
    except LimitExceededError as exc:
        logger.info("Trip creation rejected for user %s: %s", user_id, exc.message)
        raise

    try:
        registered = _register_missing_spots(SpotRepository(session), plans)
        trip_id = trip_repository.add_trip(
            Trip(
                id=None,
                user_id=user_id,
                title=title,
                start_date=start_date,
                end_date=end_date,
                image_url=image_url,
                trip_info=trip_info,
            )
        )
        for plan in plans:
            _add_plan(trip_repository, trip_id, plan)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info("Trip %s created for user %s (%d new spots)", trip_id, user_id, registered)
    return get_trip(session, user_id=user_id, trip_id=trip_id)
