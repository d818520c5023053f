"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from moptabi.domain.entities import User
from moptabi.infrastructure.models import UserModel


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.created_at.desc(), UserModel.id)
        return [self._to_entity(model) for model in query.all()]

    def list_ids(self) -> list[str]:
        return [user_id for (user_id,) in self.session.query(UserModel.id).all()]

    def get(self, user_id: str) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def count(self) -> int:
        return self.session.query(func.count(UserModel.id)).scalar() or 0

    def count_logged_in_since(self, since: datetime) -> int:
        return (
            self.session.query(func.count(UserModel.id))
            .filter(UserModel.last_login_at.is_not(None))
            .filter(UserModel.last_login_at >= since)
            .scalar()
            or 0
        )

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=model.role,
            email=model.email,
            name=model.name,
            image=model.image,
            created_at=model.created_at,
            last_login_at=model.last_login_at,
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.id = user.id
            model.created_at = user.created_at
        model.role = user.role
        model.email = user.email
        model.name = user.name
        model.image = user.image
        model.last_login_at = user.last_login_at
