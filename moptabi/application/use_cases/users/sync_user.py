"""Use case for registering a user on first sight or recording a new login."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from moptabi.domain.entities import RoleType, User
from moptabi.infrastructure.repositories import UserRepository
from moptabi.utils import utc_now


@dataclass(frozen=True)
class UserSyncResult:
    user: User
    created: bool


def sync_user(
    session: Session,
    *,
    user_id: str,
    email: str | None = None,
    name: str | None = None,
    image: str | None = None,
) -> UserSyncResult:
    """Create the user identified by ``user_id`` or bump its last login."""

    repository = UserRepository(session)
    now = utc_now()
    user = repository.get(user_id)
    if user is None:
        created = repository.create(
            User(
                id=user_id,
                role=RoleType.USER,
                email=email or None,
                name=name or None,
                image=image or None,
                created_at=now,
                last_login_at=now,
            )
        )
        return UserSyncResult(user=created, created=True)

    user.last_login_at = now
    return UserSyncResult(user=repository.update(user), created=False)


def ensure_user(
    session: Session,
    *,
    user_id: str,
    email: str | None = None,
    name: str | None = None,
    image: str | None = None,
) -> User:
    """Return the user identified by ``user_id``, registering it when unknown.

    Unlike :func:`sync_user` this does not count as a login.
    """

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is not None:
        return user
    return repository.create(
        User(
            id=user_id,
            role=RoleType.USER,
            email=email or None,
            name=name or None,
            image=image or None,
            created_at=utc_now(),
        )
    )
