"""Endpoints listing the spots a user wants to visit, visited or used as endpoints."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from moptabi.application.use_cases.spots import (
    UnvisitedSortBy,
    VisitedSortBy,
    VisitedSpot,
    get_endpoint_history,
    list_unvisited_spots,
    list_visited_spots,
)
from moptabi.domain.entities.wishlist import MAX_PRIORITY, MIN_PRIORITY
from moptabi.infrastructure.database import get_db
from moptabi.interfaces.api.dependencies import get_current_user_id
from moptabi.interfaces.api.schemas import (
    EndpointHistoryRead,
    SpotRead,
    VisitedSpotRead,
    WishlistRead,
)

router = APIRouter(prefix="/spots", tags=["spots"])


def _visited_to_schema(row: VisitedSpot) -> VisitedSpotRead:
    entry = row.wishlist
    return VisitedSpotRead(
        id=row.id,
        spot_id=row.spot_id,
        user_id=row.user_id,
        memo=row.memo,
        priority=row.priority,
        visited=row.visited,
        visited_at=entry.visited_at if entry is not None else row.plan_date,
        created_at=entry.created_at if entry is not None else None,
        plan_date=row.plan_date,
        visit_count=row.visit_count,
        spot=SpotRead.model_validate(row.spot) if row.spot is not None else None,
    )


@router.get("/", response_model=EndpointHistoryRead)
def read_endpoint_history(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> EndpointHistoryRead:
    """Return the departures and destinations used in the caller's earlier trips."""

    return EndpointHistoryRead.model_validate(get_endpoint_history(db, user_id))


@router.get("/unvisited", response_model=list[WishlistRead])
def read_unvisited_spots(
    prefecture: str | None = Query(None),
    priority: int | None = Query(None, ge=MIN_PRIORITY, le=MAX_PRIORITY),
    sort_by: UnvisitedSortBy = Query(UnvisitedSortBy.PRIORITY, alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder", pattern="^(asc|desc)$"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> list[WishlistRead]:
    entries = list_unvisited_spots(
        db,
        user_id,
        prefecture=prefecture,
        priority=priority,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return [WishlistRead.model_validate(entry) for entry in entries]


@router.get("/visited", response_model=list[VisitedSpotRead])
def read_visited_spots(
    prefecture: str | None = Query(None),
    date_from: date | None = Query(None, alias="dateFrom"),
    date_to: date | None = Query(None, alias="dateTo"),
    min_visit_count: int | None = Query(None, alias="minVisitCount", ge=1),
    sort_by: VisitedSortBy = Query(VisitedSortBy.VISITED_AT, alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder", pattern="^(asc|desc)$"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> list[VisitedSpotRead]:
    """Return visited wishlist entries followed by spots from the caller's plans."""

    rows = list_visited_spots(
        db,
        user_id,
        prefecture=prefecture,
        date_from=date_from,
        date_to=date_to,
        min_visit_count=min_visit_count,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return [_visited_to_schema(row) for row in rows]
