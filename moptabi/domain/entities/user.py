"""Domain entity representing an application user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class RoleType(str, Enum):
    """Roles a user can hold."""

    ADMIN = "ADMIN"
    USER = "USER"
    GUEST = "GUEST"


@dataclass
class User:
    """Core attributes describing an application user.

    ``id`` is the identifier issued by the identity provider, so it is a string
    rather than a database sequence.
    """

    id: str
    role: RoleType = RoleType.USER
    email: str | None = None
    name: str | None = None
    image: str | None = None
    created_at: datetime | None = None
    last_login_at: datetime | None = None

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.role == RoleType.ADMIN

    @property
    def first_name(self) -> str:
        parts = (self.name or "").split(" ")
        return parts[0] if parts else ""

    @property
    def last_name(self) -> str:
        parts = (self.name or "").split(" ")
        return parts[1] if len(parts) > 1 else ""


__all__ = ["RoleType", "User"]
