"""Endpoints for the places a user wants to visit."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from moptabi.application.use_cases.wishlist import (
    count_wishlist,
    create_wishlist_entry,
    delete_wishlist_entry,
    list_wishlist,
    update_wishlist_entry,
)
from moptabi.infrastructure.database import get_db
from moptabi.interfaces.api.dependencies import get_current_user_id, get_registered_user_id
from moptabi.interfaces.api.schemas import (
    CountWithLimitRead,
    WishlistCreate,
    WishlistRead,
    WishlistUpdate,
)

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("/", response_model=list[WishlistRead])
def list_entries(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> list[WishlistRead]:
    """Return the caller's wishlist ordered by priority."""

    return [WishlistRead.model_validate(entry) for entry in list_wishlist(db, user_id)]


@router.get("/count", response_model=CountWithLimitRead)
def count_entries(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> CountWithLimitRead:
    return CountWithLimitRead.model_validate(count_wishlist(db, user_id))


@router.post("/", response_model=WishlistRead, status_code=status.HTTP_201_CREATED)
def create_entry(
    payload: WishlistCreate,
    user_id: str = Depends(get_registered_user_id),
    db: Session = Depends(get_db),
) -> WishlistRead:
    """Add a spot to the wishlist, registering the spot when it is new."""

    entry = create_wishlist_entry(
        db,
        user_id=user_id,
        spot=payload.spot.to_entity(),
        memo=payload.memo,
        priority=payload.priority,
        visited=payload.visited,
        visited_at=payload.visited_at,
    )
    return WishlistRead.model_validate(entry)


@router.patch("/{entry_id}", response_model=WishlistRead)
def update_entry(
    entry_id: int,
    payload: WishlistUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> WishlistRead:
    changes = {
        name: getattr(payload, name)
        for name in ("memo", "priority", "visited", "visited_at")
        if name in payload.model_fields_set
    }
    entry = update_wishlist_entry(db, user_id=user_id, entry_id=entry_id, **changes)
    return WishlistRead.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(
    entry_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> Response:
    delete_wishlist_entry(db, user_id=user_id, entry_id=entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
