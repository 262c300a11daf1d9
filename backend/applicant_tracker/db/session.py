# backend/applicant_tracker/db/session.py
"""
SQLAlchemy session/engine bootstrap.
- create_db_engine(): engine with a managed connection pool (server databases)
  or a plain SQLite engine (local dev, tests)
- make_session_factory(), session_scope(): unit-of-work helpers
- ensure_tables(), ping(): schema bootstrap and health probe
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# --- pool sizing (server databases only) -------------------------------------

POOL_SIZE = 25
POOL_MAX_OVERFLOW = 0
POOL_RECYCLE_SECONDS = 5 * 60
POOL_TIMEOUT_SECONDS = 30

# --- SQLAlchemy base ---------------------------------------------------------

class Base(DeclarativeBase):
    pass

# --- engine & session --------------------------------------------------------

def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Build the engine. SQLite gets no pool sizing; an in-memory SQLite URL
    shares one connection so every session sees the same database.
    """
    url = make_url(database_url)
    kwargs: Dict[str, Any] = {"echo": echo, "future": True}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=POOL_SIZE,
            max_overflow=POOL_MAX_OVERFLOW,
            pool_recycle=POOL_RECYCLE_SECONDS,
            pool_timeout=POOL_TIMEOUT_SECONDS,
            pool_pre_ping=True,
        )

    engine = create_engine(url, **kwargs)
    logger.debug("engine created for %s", url.render_as_string(hide_password=True))
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, class_=Session, autoflush=False, expire_on_commit=False)

# --- helpers ----------------------------------------------------------------

@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Context manager for one unit of work.
    Example:
        with session_scope(factory) as s:
            s.add(obj)
    Commits on success, rolls back and re-raises on error, always closes.
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def ensure_tables(engine: Engine) -> None:
    """
    Create tables if needed. Import models lazily to avoid circulars.
    Call this once at startup.
    """
    # local import to prevent circular import during module import
    from . import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def ping(engine: Engine) -> bool:
    """True when a trivial round-trip to the database succeeds."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error("database ping failed: %s", e)
        return False


__all__ = [
    "Base",
    "create_db_engine",
    "make_session_factory",
    "session_scope",
    "ensure_tables",
    "ping",
]
