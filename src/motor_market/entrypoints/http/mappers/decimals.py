from __future__ import annotations

from decimal import Decimal, InvalidOperation

from motor_market.domain.errors import FieldError, ValidationError, field_error


def parse_decimals(values: dict[str, str | None]) -> dict[str, Decimal | None]:
    """
    Convert decimal strings from a DTO to Decimals, field by field.

    Every unparseable field is reported in one ValidationError so the
    client sees all of them at once. None passes through.

    Raises:
        ValidationError: If any value is not a valid decimal
    """
    errors: list[FieldError] = []
    parsed: dict[str, Decimal | None] = {}

    for field, raw in values.items():
        if raw is None:
            parsed[field] = None
            continue
        try:
            parsed[field] = Decimal(raw)
        except (InvalidOperation, ValueError):
            errors.append(field_error(field, f"Must be a valid decimal: {raw}", "INVALID_DECIMAL"))

    ValidationError.raise_if_any(errors)
    return parsed


def money_str(value: Decimal | None) -> str | None:
    """Decimal → str at the boundary."""
    return str(value) if value is not None else None
