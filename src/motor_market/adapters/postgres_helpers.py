"""Small conversions shared by the PostgreSQL adapters."""

from __future__ import annotations

import uuid

from sqlalchemy import ColumnElement
from sqlalchemy.orm import InstrumentedAttribute


def parse_uuid(value: str) -> uuid.UUID | None:
    """UUID for a domain ID string, or None if the string is not a UUID (no row can match)."""
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


def as_uuid(value: str) -> uuid.UUID:
    return uuid.UUID(value)


def optional_uuid(value: str | None) -> uuid.UUID | None:
    return as_uuid(value) if value is not None else None


def optional_str(value: uuid.UUID | None) -> str | None:
    return str(value) if value is not None else None


def contains_ci(column: InstrumentedAttribute[str], term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards in ``term`` taken literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")
