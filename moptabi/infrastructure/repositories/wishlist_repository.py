"""Persistence layer for wishlist entries."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import asc, desc, func
from sqlalchemy.orm import Session, joinedload

from moptabi.domain.entities import Wishlist
from moptabi.infrastructure.models import SpotMetaModel, SpotModel, WishlistModel
from moptabi.infrastructure.repositories.spot_repository import SpotRepository

WISHLIST_SORT_COLUMNS = {
    "priority": WishlistModel.priority,
    "createdAt": WishlistModel.created_at,
    "visitedAt": WishlistModel.visited_at,
}


class WishlistRepository:
    """Provide CRUD operations and filtered listings for wishlist entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _base_query(self, user_id: str):
        return (
            self.session.query(WishlistModel)
            .options(joinedload(WishlistModel.spot).joinedload(SpotModel.meta))
            .filter(WishlistModel.user_id == user_id)
        )

    def list_for_user(self, user_id: str) -> Sequence[Wishlist]:
        query = self._base_query(user_id).order_by(
            WishlistModel.priority.desc(), WishlistModel.id.asc()
        )
        return [self._to_entity(model) for model in query.all()]

    def list_filtered(
        self,
        user_id: str,
        *,
        visited: int,
        prefecture: str | None = None,
        priority: int | None = None,
        visited_from: datetime | None = None,
        visited_to: datetime | None = None,
        sort_by: str | None = None,
        sort_order: str = "desc",
    ) -> Sequence[Wishlist]:
        query = self._base_query(user_id).filter(WishlistModel.visited == visited)
        if priority is not None:
            query = query.filter(WishlistModel.priority == priority)
        if prefecture:
            query = query.join(SpotMetaModel, SpotMetaModel.spot_id == WishlistModel.spot_id).filter(
                SpotMetaModel.prefecture == prefecture
            )
        if visited_from is not None:
            query = query.filter(WishlistModel.visited_at >= visited_from)
        if visited_to is not None:
            query = query.filter(WishlistModel.visited_at <= visited_to)

        column = WISHLIST_SORT_COLUMNS.get(sort_by or "")
        if column is not None:
            direction = asc if sort_order == "asc" else desc
            query = query.order_by(direction(column))
        query = query.order_by(WishlistModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def get_for_user(self, entry_id: int, user_id: str) -> Wishlist | None:
        model = self._base_query(user_id).filter(WishlistModel.id == entry_id).first()
        return self._to_entity(model) if model else None

    def get_by_spot(self, user_id: str, spot_id: str) -> Wishlist | None:
        model = self._base_query(user_id).filter(WishlistModel.spot_id == spot_id).first()
        return self._to_entity(model) if model else None

    def count_for_user(self, user_id: str) -> int:
        return (
            self.session.query(func.count(WishlistModel.id))
            .filter(WishlistModel.user_id == user_id)
            .scalar()
            or 0
        )

    def count_by_user_ids(self, user_ids: Sequence[str]) -> dict[str, int]:
        if not user_ids:
            return {}
        rows = (
            self.session.query(WishlistModel.user_id, func.count(WishlistModel.id))
            .filter(WishlistModel.user_id.in_(set(user_ids)))
            .group_by(WishlistModel.user_id)
            .all()
        )
        return {user_id: count for user_id, count in rows if count}

    def count(self, *, created_before: datetime | None = None) -> int:
        query = self.session.query(func.count(WishlistModel.id))
        if created_before is not None:
            query = query.filter(WishlistModel.created_at < created_before)
        return query.scalar() or 0

    def create(self, entry: Wishlist) -> Wishlist:
        model = WishlistModel()
        self._apply_entity_to_model(model, entry, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        return self.get_for_user(model.id, entry.user_id)

    def update(self, entry: Wishlist) -> Wishlist:
        model = self.session.get(WishlistModel, entry.id)
        if model is None:
            msg = f"Wishlist entry with id {entry.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, entry, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, entry_id: int) -> None:
        model = self.session.get(WishlistModel, entry_id)
        if model is None:
            msg = f"Wishlist entry with id {entry_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: WishlistModel) -> Wishlist:
        return Wishlist(
            id=model.id,
            user_id=model.user_id,
            spot_id=model.spot_id,
            priority=model.priority,
            visited=model.visited,
            memo=model.memo,
            visited_at=model.visited_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            spot=(
                SpotRepository.to_entity(model.spot, include_stations=False)
                if model.spot is not None
                else None
            ),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: WishlistModel, entry: Wishlist, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.user_id = entry.user_id
            model.spot_id = entry.spot_id
            if entry.created_at is not None:
                model.created_at = entry.created_at
        model.memo = entry.memo
        model.priority = entry.priority
        model.visited = entry.visited
        model.visited_at = entry.visited_at
