"""Persistence: engine, session factory, and Base for SQLAlchemy ORM.

The engine and session factory are created lazily on first use (get_db)
so import does not trigger Settings validation. Searches run synchronously
within one request, so a plain (sync) Session is used.
"""

from collections.abc import Iterator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from socialsearch.core.config import get_settings
from socialsearch.domain.exceptions import SqlNotConfiguredException
from socialsearch.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
SessionLocal: sessionmaker[Session] | None = None


def _ensure_engine() -> None:
    """Create engine and SessionLocal on first use (only when DATABASE_URL is set)."""
    global engine, SessionLocal
    if SessionLocal is not None:
        return
    settings = get_settings()
    if not settings.database_url:
        return
    engine = create_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )
    SessionLocal = sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )
    logger.debug("Created SQL engine for %s", engine.url.render_as_string(hide_password=True))


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def get_db() -> Iterator[Session]:
    """Yield a session for one search request; rolled back and closed afterwards.

    Raises:
        SqlNotConfiguredException: If DATABASE_URL is not set.
    """
    _ensure_engine()
    if SessionLocal is None:
        raise SqlNotConfiguredException()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
