from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from motor_market.infra.db.config import PoolSettings, database_url

# Lazy initialization - nothing connects at import time
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine (lazy initialization).

    Pool sizing comes from PoolSettings.from_env(); pool_pre_ping verifies a
    connection before each checkout.
    """
    global _engine
    if _engine is None:
        settings = PoolSettings.from_env()
        _engine = create_engine(
            database_url(),
            pool_size=settings.size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=True,
            pool_recycle=settings.recycle_seconds,
            echo=settings.echo_sql,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


def dispose_engine() -> None:
    """Close pooled connections and forget the engine (application shutdown)."""
    global _engine, _session_local
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_local = None


@contextmanager
def get_session() -> Iterator[Session]:
    """
    Get a database session with automatic commit/rollback.

    Everything written through one session commits or rolls back together,
    so a sale, its vehicle update and its log entry land as one unit.
    """
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
