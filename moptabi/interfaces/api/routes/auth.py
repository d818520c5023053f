"""Endpoints for signing users in and for the administrator user overview."""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from moptabi.application.use_cases.users import (
    UserListItem,
    UserSortBy,
    get_dashboard_stats as get_dashboard_stats_uc,
    list_users as list_users_uc,
    sync_user,
)
from moptabi.domain.entities import User
from moptabi.domain.entities.pagination import DEFAULT_PAGE_LIMIT, clamp_limit
from moptabi.infrastructure.database import get_db
from moptabi.interfaces.api.dependencies import (
    UserProfileHeaders,
    get_current_user_id,
    require_admin,
)
from moptabi.interfaces.api.schemas import (
    AuthSyncResponse,
    DashboardStatsRead,
    PaginationRead,
    UserListItemRead,
    UserListResponse,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _list_item_to_read_model(item: UserListItem) -> UserListItemRead:
    user = item.user
    return UserListItemRead(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        image_url=user.image,
        registered_at=item.registered_at,
        last_login_at=item.last_login_at,
        role=user.role,
        plan_count=item.plan_count,
        wishlist_count=item.wishlist_count,
    )


@router.get("/", response_model=AuthSyncResponse)
def sync_current_user(
    user_id: str = Depends(get_current_user_id),
    profile: UserProfileHeaders = Depends(),
    db: Session = Depends(get_db),
):
    """Register the caller on first sign in or record a new login."""

    result = sync_user(
        db,
        user_id=user_id,
        email=profile.email,
        name=profile.name,
        image=profile.image,
    )
    status_code = status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
    if result.created:
        logger.info("Registered new user %s", user_id)
    body = AuthSyncResponse(status=status_code, user=UserRead.model_validate(result.user))
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


@router.get("/list", response_model=UserListResponse)
def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1),
    search: str | None = Query(None),
    sort_by: UserSortBy = Query(UserSortBy.LAST_LOGIN_AT, alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder", pattern="^(asc|desc)$"),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserListResponse:
    """Return one page of registered users with their plan and wishlist counts."""

    result = list_users_uc(
        db,
        page=page,
        limit=clamp_limit(limit),
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return UserListResponse(
        users=[_list_item_to_read_model(item) for item in result.users],
        pagination=PaginationRead.model_validate(result.pagination),
    )


@router.get("/dashboard", response_model=DashboardStatsRead)
def read_dashboard(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> DashboardStatsRead:
    return DashboardStatsRead.model_validate(get_dashboard_stats_uc(db))
