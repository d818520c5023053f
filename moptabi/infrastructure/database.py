"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from moptabi.config import get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the process wide engine built from the configured ``DATABASE_URL``."""

    settings = get_settings()
    database_url = settings.database_url
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=settings.sql_echo,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(database_url, echo=settings.sql_echo, pool_pre_ping=True)
    logger.debug("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def reset_engine() -> None:
    """Dispose the cached engine so the next call rebuilds it from settings."""

    if get_engine.cache_info().currsize:
        get_engine().dispose()
    get_session_factory.cache_clear()
    get_engine.cache_clear()


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from moptabi.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=get_engine(), checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "get_db",
    "get_engine",
    "get_session_factory",
    "initialize_database",
    "reset_engine",
]
