"""Persistence layer for trips, their day plans, plan spots and transports."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import asc, desc, func, not_, or_
from sqlalchemy.orm import Session, selectinload

from moptabi.domain.entities import Plan, PlanSpot, Transport, Trip, TripInfo
from moptabi.domain.entities.spot import DEPARTURE_SPOT_PREFIX, DESTINATION_SPOT_PREFIX
from moptabi.infrastructure.models import (
    PlanModel,
    PlanSpotModel,
    SpotMetaModel,
    SpotModel,
    TransportModel,
    TripInfoModel,
    TripModel,
)
from moptabi.infrastructure.repositories.spot_repository import SpotRepository


def _endpoint_filter():
    return or_(
        PlanSpotModel.spot_id.startswith(DEPARTURE_SPOT_PREFIX),
        PlanSpotModel.spot_id.startswith(DESTINATION_SPOT_PREFIX),
    )


class TripRepository:
    """Provide reads, staged inserts and deletes for trip aggregates.

    ``add_*`` methods only flush; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[Trip]:
        query = (
            self.session.query(TripModel)
            .options(selectinload(TripModel.trip_info), selectinload(TripModel.plans))
            .filter(TripModel.user_id == user_id)
            .order_by(TripModel.id)
        )
        return [self._to_entity(model, include_plan_details=False) for model in query.all()]

    def get_for_user(self, trip_id: int, user_id: str) -> Trip | None:
        model = (
            self.session.query(TripModel)
            .options(
                selectinload(TripModel.trip_info),
                selectinload(TripModel.plans)
                .selectinload(PlanModel.plan_spots)
                .selectinload(PlanSpotModel.spot)
                .selectinload(SpotModel.nearest_stations),
                selectinload(TripModel.plans).selectinload(PlanModel.transports),
            )
            .filter(TripModel.id == trip_id, TripModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model, include_plan_details=True) if model else None

    def count_for_user(self, user_id: str) -> int:
        return (
            self.session.query(func.count(TripModel.id))
            .filter(TripModel.user_id == user_id)
            .scalar()
            or 0
        )

    def count_by_user_ids(self, user_ids: Sequence[str]) -> dict[str, int]:
        if not user_ids:
            return {}
        rows = (
            self.session.query(TripModel.user_id, func.count(TripModel.id))
            .filter(TripModel.user_id.in_(set(user_ids)))
            .group_by(TripModel.user_id)
            .all()
        )
        return {user_id: count for user_id, count in rows if count}

    def count(self, *, created_before: datetime | None = None) -> int:
        query = self.session.query(func.count(TripModel.id))
        if created_before is not None:
            query = query.filter(TripModel.created_at < created_before)
        return query.scalar() or 0

    def average_days_per_trip(self) -> float:
        """Return the number of day plans divided by the number of trips having one."""

        trip_count, plan_count = self.session.query(
            func.count(func.distinct(PlanModel.trip_id)), func.count(PlanModel.id)
        ).one()
        if not trip_count:
            return 0.0
        return plan_count / trip_count

    def list_plan_spots(
        self,
        user_id: str,
        *,
        endpoints: bool = False,
        prefecture: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        sort_order: str | None = None,
    ) -> list[tuple[PlanSpot, str]]:
        """Return the user's plan spots paired with the date of their plan.

        ``endpoints`` selects departure/destination sentinel spots instead of
        regular spots.
        """

        query = (
            self.session.query(PlanSpotModel, PlanModel.date)
            .join(PlanModel, PlanModel.id == PlanSpotModel.plan_id)
            .join(TripModel, TripModel.id == PlanModel.trip_id)
            .filter(TripModel.user_id == user_id)
        )
        endpoint_filter = _endpoint_filter()
        query = query.filter(endpoint_filter if endpoints else not_(endpoint_filter))
        if prefecture:
            query = query.join(
                SpotMetaModel, SpotMetaModel.spot_id == PlanSpotModel.spot_id
            ).filter(SpotMetaModel.prefecture == prefecture)
        if date_from:
            query = query.filter(PlanModel.date >= date_from)
        if date_to:
            query = query.filter(PlanModel.date <= date_to)
        if sort_order is not None:
            direction = asc if sort_order == "asc" else desc
            query = query.order_by(direction(PlanModel.date))
        query = query.order_by(PlanSpotModel.id.asc())
        return [
            (self._plan_spot_to_entity(model, include_stations=False), plan_date)
            for model, plan_date in query.all()
        ]

    def add_trip(self, trip: Trip) -> int:
        model = TripModel(
            user_id=trip.user_id,
            title=trip.title,
            image_url=trip.image_url,
            start_date=trip.start_date,
            end_date=trip.end_date,
        )
        for info in trip.trip_info:
            model.trip_info.append(
                TripInfoModel(
                    date=info.date,
                    genre_id=info.genre_id,
                    transportation_methods=list(info.transportation_methods),
                    memo=info.memo,
                )
            )
        self.session.add(model)
        self.session.flush()
        return model.id

    def add_plan(self, trip_id: int, date: str) -> int:
        model = PlanModel(trip_id=trip_id, date=date)
        self.session.add(model)
        self.session.flush()
        return model.id

    def add_plan_spot(self, plan_spot: PlanSpot) -> int:
        model = PlanSpotModel(
            plan_id=plan_spot.plan_id,
            spot_id=plan_spot.spot_id,
            stay_start=plan_spot.stay_start,
            stay_end=plan_spot.stay_end,
            order=plan_spot.order,
            memo=plan_spot.memo,
        )
        self.session.add(model)
        self.session.flush()
        return model.id

    def add_transport(self, transport: Transport) -> int:
        model = TransportModel(
            plan_id=transport.plan_id,
            from_type=transport.from_type,
            to_type=transport.to_type,
            from_spot_id=transport.from_spot_id,
            to_spot_id=transport.to_spot_id,
            travel_time=transport.travel_time,
            cost=transport.cost,
            transport_method=transport.transport_method,
        )
        self.session.add(model)
        self.session.flush()
        return model.id

    def delete(self, trip_id: int) -> None:
        model = self.session.get(TripModel, trip_id)
        if model is None:
            msg = f"Trip with id {trip_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: TripModel, *, include_plan_details: bool) -> Trip:
        return Trip(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            start_date=model.start_date,
            end_date=model.end_date,
            image_url=model.image_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
            trip_info=[TripRepository._trip_info_to_entity(info) for info in model.trip_info],
            plans=[
                TripRepository._plan_to_entity(plan, include_details=include_plan_details)
                for plan in model.plans
            ],
        )

    @staticmethod
    def _trip_info_to_entity(model: TripInfoModel) -> TripInfo:
        return TripInfo(
            id=model.id,
            trip_id=model.trip_id,
            date=model.date,
            genre_id=model.genre_id,
            transportation_methods=list(model.transportation_methods or []),
            memo=model.memo,
        )

    @staticmethod
    def _plan_to_entity(model: PlanModel, *, include_details: bool) -> Plan:
        plan = Plan(id=model.id, trip_id=model.trip_id, date=model.date)
        if include_details:
            plan.plan_spots = sorted(
                (TripRepository._plan_spot_to_entity(ps) for ps in model.plan_spots),
                key=lambda plan_spot: plan_spot.order,
            )
            plan.transports = [
                TripRepository._transport_to_entity(transport) for transport in model.transports
            ]
        return plan

    @staticmethod
    def _plan_spot_to_entity(model: PlanSpotModel, *, include_stations: bool = True) -> PlanSpot:
        return PlanSpot(
            id=model.id,
            plan_id=model.plan_id,
            spot_id=model.spot_id,
            stay_start=model.stay_start,
            stay_end=model.stay_end,
            order=model.order,
            memo=model.memo,
            spot=(
                SpotRepository.to_entity(model.spot, include_stations=include_stations)
                if model.spot is not None
                else None
            ),
        )

    @staticmethod
    def _transport_to_entity(model: TransportModel) -> Transport:
        return Transport(
            id=model.id,
            plan_id=model.plan_id,
            from_type=model.from_type,
            to_type=model.to_type,
            transport_method=model.transport_method,
            travel_time=model.travel_time,
            cost=model.cost,
            from_spot_id=model.from_spot_id,
            to_spot_id=model.to_spot_id,
        )
