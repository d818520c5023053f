"""Endpoints for creating, reading and deleting trips and validating drafts."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from moptabi.application.use_cases.planning import build_planning_store, check_validation
from moptabi.application.use_cases.trips import (
    PlanInput,
    PlanSpotInput,
    count_trips,
    create_trip as create_trip_uc,
    delete_trip as delete_trip_uc,
    get_trip_image_path,
    get_trip,
    list_trips,
    upload_trip_image,
)
from moptabi.domain.entities import NearestStation, OpeningHours, Spot, SpotMeta, TripInfo
from moptabi.domain.planning import (
    DateKey,
    DayPlan,
    DraftLocation,
    DraftSpot,
    DraftTransport,
    DraftTripInfo,
    PlanningStore,
)
from moptabi.infrastructure.database import get_db
from moptabi.interfaces.api.dependencies import get_current_user_id, get_registered_user_id
from moptabi.interfaces.api.schemas import (
    CountWithLimitRead,
    DraftSpotInput,
    DraftValidationResult,
    ImageUploadRead,
    MessageResponse,
    TripCreate,
    TripDetailRead,
    TripDraft,
    TripRead,
    TripSpotInput,
)

router = APIRouter(prefix="/trips", tags=["trips"])
logger = logging.getLogger(__name__)

TRIP_DELETED = "Trip deleted successfully"


def _spot_from_input(item: TripSpotInput) -> Spot:
    stations = []
    if item.nearest_station is not None:
        station = item.nearest_station
        stations.append(
            NearestStation(
                id=None,
                spot_id=item.id,
                name=station.name,
                walking_time=station.walking_time,
                latitude=station.lat,
                longitude=station.lng,
            )
        )
    return Spot(
        id=item.id,
        meta=SpotMeta(
            id=item.id,
            spot_id=item.id,
            name=item.location.name,
            latitude=item.location.lat,
            longitude=item.location.lng,
            image=item.image,
            rating=item.rating,
            categories=list(item.category),
            catchphrase=item.catchphrase,
            description=item.description,
            opening_hours=(
                [OpeningHours(day=entry.day, hours=entry.hours) for entry in item.regular_opening_hours]
                if item.regular_opening_hours is not None
                else None
            ),
            address=item.address,
            prefecture=item.prefecture,
            url=item.url,
        ),
        nearest_stations=stations,
    )


def _plan_spot_from_input(item: TripSpotInput) -> PlanSpotInput:
    return PlanSpotInput(
        spot=_spot_from_input(item),
        stay_start=item.stay_start,
        stay_end=item.stay_end,
        transport_method_ids=list(item.transports.transport_method_ids),
        order=item.order,
        memo=item.memo,
        travel_time=item.transports.travel_time,
        cost=item.transports.cost,
    )


def _draft_spot(item: DraftSpotInput) -> DraftSpot:
    transports = None
    if item.transports is not None:
        transports = DraftTransport(
            transport_method_ids=list(item.transports.transport_method_ids),
            from_type=item.transports.from_type,
            to_type=item.transports.to_type,
            travel_time=item.transports.travel_time,
            cost=item.transports.cost,
        )
    return DraftSpot(
        id=item.id,
        location=DraftLocation(
            name=item.location.name, lat=item.location.lat, lng=item.location.lng
        ),
        transports=transports,
        order=item.order,
        stay_start=item.stay_start,
        stay_end=item.stay_end,
        memo=item.memo,
        image=item.image,
        rating=item.rating,
        category=list(item.category),
    )


def _store_from_draft(draft: TripDraft) -> PlanningStore:
    return build_planning_store(
        title=draft.title,
        start_date=draft.start_date,
        end_date=draft.end_date,
        image_url=draft.image_url,
        trip_info=[
            DraftTripInfo(
                date=DateKey.parse(info.date),
                genre_id=info.genre_id,
                transportation_method=list(info.transportation_method),
                memo=info.memo,
            )
            for info in draft.trip_info
        ],
        plans=[
            DayPlan(date=DateKey.parse(plan.date), spots=[_draft_spot(spot) for spot in plan.spots])
            for plan in draft.plans
        ],
    )


def _keyed_by_day(errors: dict[DateKey, dict[str, str]]) -> dict[str, dict[str, str]]:
    return {key.isoformat(): dict(value) for key, value in sorted(errors.items()) if value}


@router.get("/", response_model=list[TripRead])
def list_user_trips(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> list[TripRead]:
    return [TripRead.model_validate(trip) for trip in list_trips(db, user_id)]


@router.get("/count", response_model=CountWithLimitRead)
def count_user_trips(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> CountWithLimitRead:
    return CountWithLimitRead.model_validate(count_trips(db, user_id))


@router.post("/create", response_model=TripDetailRead, status_code=status.HTTP_201_CREATED)
def create_trip(
    payload: TripCreate,
    user_id: str = Depends(get_registered_user_id),
    db: Session = Depends(get_db),
) -> TripDetailRead:
    """Create a trip with its day plans, spots and transports."""

    trip = create_trip_uc(
        db,
        user_id=user_id,
        title=payload.title,
        start_date=payload.start_date,
        end_date=payload.end_date,
        image_url=payload.image_url,
        trip_info=[
            TripInfo(
                id=None,
                trip_id=None,
                date=info.date,
                genre_id=info.genre_id,
                transportation_methods=list(info.transportation_method),
                memo=info.memo,
            )
            for info in payload.trip_info
        ],
        plans=[
            PlanInput(date=plan.date, spots=[_plan_spot_from_input(spot) for spot in plan.spots])
            for plan in payload.plans
        ],
    )
    return TripDetailRead.model_validate(trip)


@router.post("/validate", response_model=DraftValidationResult)
def validate_trip_draft(
    draft: TripDraft,
    _: str = Depends(get_current_user_id),
) -> DraftValidationResult:
    """Report every problem of an itinerary draft without persisting it."""

    store = _store_from_draft(draft)
    is_error = check_validation(store)
    return DraftValidationResult(
        is_error=is_error,
        errors=dict(store.errors),
        trip_info_errors=_keyed_by_day(store.trip_info_errors),
        plan_errors=_keyed_by_day(store.plan_errors),
        spot_errors=_keyed_by_day(store.spot_errors),
    )


@router.get("/{trip_id:int}", response_model=TripDetailRead)
def read_trip(
    trip_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> TripDetailRead:
    return TripDetailRead.model_validate(get_trip(db, user_id=user_id, trip_id=trip_id))


@router.delete("/{trip_id:int}", response_model=MessageResponse)
def delete_trip(
    trip_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> MessageResponse:
    delete_trip_uc(db, user_id=user_id, trip_id=trip_id)
    logger.info("Trip %s deleted by user %s", trip_id, user_id)
    return MessageResponse(message=TRIP_DELETED)


@router.post("/upload", response_model=ImageUploadRead, status_code=status.HTTP_201_CREATED)
def upload_image(
    file: UploadFile = File(...),
    _: str = Depends(get_current_user_id),
) -> ImageUploadRead:
    """Store a trip cover image and return the name it is served under."""

    try:
        file_bytes = file.file.read()
    finally:
        file.file.close()
    return ImageUploadRead(file_name=upload_trip_image(file_bytes, file.filename or ""))


@router.get("/{file_name}")
def read_image(file_name: str) -> FileResponse:
    return FileResponse(get_trip_image_path(file_name))
