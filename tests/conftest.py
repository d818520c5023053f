"""Shared fixtures: a throwaway SQLite database and a client bound to it."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from urllib.parse import quote

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

TEST_DB_PATH = Path(tempfile.gettempdir()) / "moptabi_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"

from moptabi.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from moptabi.domain.entities import RoleType  # noqa: E402
from moptabi.infrastructure import models  # noqa: E402,F401
from moptabi.infrastructure.database import (  # noqa: E402
    Base,
    get_engine,
    get_session_factory,
    reset_engine,
)
from moptabi.infrastructure.models import UserModel  # noqa: E402
from moptabi.main import create_app  # noqa: E402

ADMIN_ID = "admin-user"


@pytest.fixture(autouse=True)
def reset_database():
    """Recreate every table so each test starts from an empty database."""

    reset_engine()
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    reset_engine()


@pytest.fixture()
def db_session():
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


def user_headers(user_id: str, *, name: str | None = None, email: str | None = None) -> dict:
    headers = {"X-User-Id": user_id}
    if name is not None:
        headers["X-User-Name"] = quote(name)
    if email is not None:
        headers["X-User-Email"] = email
    return headers


@pytest.fixture()
def make_headers():
    return user_headers


@pytest.fixture()
def admin_headers(db_session) -> dict:
    db_session.add(
        UserModel(id=ADMIN_ID, role=RoleType.ADMIN, name="Admin User", email="admin@example.com")
    )
    db_session.commit()
    return user_headers(ADMIN_ID)
