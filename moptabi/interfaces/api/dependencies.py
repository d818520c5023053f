"""FastAPI dependency utilities."""

from urllib.parse import unquote

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from moptabi.application.use_cases.users import ensure_user
from moptabi.domain.entities import User
from moptabi.infrastructure.database import get_db
from moptabi.infrastructure.repositories import UserRepository

AUTHENTICATION_REQUIRED = "認証が必要です"
FORBIDDEN = "Forbidden"


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Return the caller identifier forwarded by the frontend in ``X-User-Id``."""

    if not x_user_id or not x_user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=AUTHENTICATION_REQUIRED,
        )
    return x_user_id.strip()


class UserProfileHeaders:
    """Profile attributes sent alongside ``X-User-Id`` on sign in."""

    def __init__(
        self,
        x_user_email: str | None = Header(default=None),
        x_user_name: str | None = Header(default=None),
        x_user_image: str | None = Header(default=None),
    ) -> None:
        self.email = x_user_email or None
        self.name = unquote(x_user_name) if x_user_name else None
        self.image = x_user_image or None


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the registered user for the caller, if any."""

    return UserRepository(db).get(user_id)


def require_admin(current_user: User | None = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if current_user is None or not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=FORBIDDEN,
        )
    return current_user


def get_registered_user_id(
    user_id: str = Depends(get_current_user_id),
    profile: UserProfileHeaders = Depends(),
    db: Session = Depends(get_db),
) -> str:
    """Return the caller identifier, registering the caller when it is unknown."""

    ensure_user(db, user_id=user_id, email=profile.email, name=profile.name, image=profile.image)
    return user_id
