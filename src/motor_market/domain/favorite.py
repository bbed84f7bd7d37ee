from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from motor_market.domain.errors import ValidationError, field_error


MAX_USER_ID_LENGTH = 100


@dataclass(frozen=True, slots=True)
class Favorite:
    """A vehicle a shopper saved. At most one per (user_id, vehicle_id)."""

    id: str
    user_id: str
    vehicle_id: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class NewFavorite:
    user_id: str
    vehicle_id: str

    def validate(self) -> None:
        if not self.user_id.strip():
            raise ValidationError(errors=[field_error("user_id", "Must not be blank")])
        if len(self.user_id) > MAX_USER_ID_LENGTH:
            raise ValidationError(
                errors=[field_error("user_id", f"At most {MAX_USER_ID_LENGTH} characters")]
            )
