from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_POOL_SIZE = 10
DEFAULT_MAX_OVERFLOW = 20
DEFAULT_RECYCLE_SECONDS = 3600


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class PoolSettings:
    """
    Connection pool sizing, overridable per deployment.

    Total max connections = size + max_overflow
    """

    size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW
    recycle_seconds: int = DEFAULT_RECYCLE_SECONDS
    echo_sql: bool = False

    @classmethod
    def from_env(cls) -> PoolSettings:
        return cls(
            size=_int_env("DB_POOL_SIZE", DEFAULT_POOL_SIZE),
            max_overflow=_int_env("DB_POOL_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW),
            recycle_seconds=_int_env("DB_POOL_RECYCLE_SECONDS", DEFAULT_RECYCLE_SECONDS),
            echo_sql=os.getenv("DB_ECHO", "").lower() in ("1", "true", "yes"),
        )
