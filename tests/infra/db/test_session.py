"""
Tests for database configuration and the session context manager.

No database is touched: the session factory and engine are patched.
"""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from motor_market.infra.db import session as session_module
from motor_market.infra.db.config import (
    DEFAULT_MAX_OVERFLOW,
    DEFAULT_POOL_SIZE,
    PoolSettings,
    database_url,
)
from motor_market.infra.db.session import dispose_engine, get_session


# ==============================================================================
# Configuration
# ==============================================================================


def test_database_url_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://app@localhost/motor_market")

    assert database_url() == "postgresql+psycopg://app@localhost/motor_market"


def test_database_url_missing_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_pool_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DB_POOL_SIZE", "DB_POOL_MAX_OVERFLOW", "DB_POOL_RECYCLE_SECONDS", "DB_ECHO"):
        monkeypatch.delenv(name, raising=False)

    settings = PoolSettings.from_env()

    assert settings.size == DEFAULT_POOL_SIZE
    assert settings.max_overflow == DEFAULT_MAX_OVERFLOW
    assert settings.echo_sql is False


def test_pool_settings_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_SIZE", "3")
    monkeypatch.setenv("DB_POOL_MAX_OVERFLOW", "0")
    monkeypatch.setenv("DB_ECHO", "true")

    settings = PoolSettings.from_env()

    assert settings.size == 3
    assert settings.max_overflow == 0
    assert settings.echo_sql is True


def test_pool_settings_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_SIZE", "ten")

    with pytest.raises(RuntimeError, match="DB_POOL_SIZE must be an integer"):
        PoolSettings.from_env()


# ==============================================================================
# get_session()
# ==============================================================================


def test_get_session_commits_and_closes_on_success() -> None:
    db_session = Mock()

    with patch.object(session_module, "get_session_local", return_value=lambda: db_session):
        with get_session() as session:
            session.add("row")

    db_session.commit.assert_called_once()
    db_session.rollback.assert_not_called()
    db_session.close.assert_called_once()


def test_get_session_rolls_back_and_reraises_on_error() -> None:
    db_session = Mock()

    with patch.object(session_module, "get_session_local", return_value=lambda: db_session):
        with pytest.raises(RuntimeError, match="sale failed"):
            with get_session():
                raise RuntimeError("sale failed")

    db_session.commit.assert_not_called()
    db_session.rollback.assert_called_once()
    db_session.close.assert_called_once()


def test_dispose_engine_releases_pool_and_resets() -> None:
    engine = Mock()

    with patch.object(session_module, "_engine", engine), patch.object(
        session_module, "_session_local", Mock()
    ):
        dispose_engine()

        engine.dispose.assert_called_once()
        assert session_module._engine is None
        assert session_module._session_local is None


def test_dispose_engine_without_engine_is_noop() -> None:
    with patch.object(session_module, "_engine", None):
        dispose_engine()

        assert session_module._engine is None
