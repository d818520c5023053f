"""Unit tests for the request header dependencies."""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from moptabi.domain.entities import RoleType, User
from moptabi.interfaces.api.dependencies import (
    AUTHENTICATION_REQUIRED,
    UserProfileHeaders,
    get_current_user_id,
    require_admin,
)


def test_current_user_id_is_stripped():
    assert get_current_user_id("  user-1 ") == "user-1"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_user_id_is_unauthorized(value):
    with pytest.raises(HTTPException) as exc_info:
        get_current_user_id(value)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == AUTHENTICATION_REQUIRED


def test_profile_headers_decode_name():
    profile = UserProfileHeaders(
        x_user_email="", x_user_name="%E5%B1%B1%E7%94%B0%20%E5%A4%AA%E9%83%8E", x_user_image=None
    )

    assert profile.name == "山田 太郎"
    assert profile.email is None
    assert profile.image is None


def test_require_admin_rejects_missing_or_regular_users():
    with pytest.raises(HTTPException) as exc_info:
        require_admin(None)
    assert exc_info.value.status_code == 403

    with pytest.raises(HTTPException):
        require_admin(User(id="user-1", role=RoleType.USER))
