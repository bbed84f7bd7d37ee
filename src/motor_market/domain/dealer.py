from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from motor_market.domain.errors import FieldError, ValidationError, field_error


MIN_RATING = 1
MAX_RATING = 5
RATING_QUANTUM = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class Dealer:
    id: str
    name: str
    location: str
    created_at: datetime
    rating: Decimal = Decimal("0.00")
    review_count: int = 0
    verified: bool = False
    description: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    image_url: str | None = None


@dataclass(frozen=True, slots=True)
class NewDealer:
    name: str
    location: str
    verified: bool = False
    description: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    image_url: str | None = None

    def validate(self) -> None:
        if not self.name.strip():
            raise ValidationError("name must not be blank")
        if not self.location.strip():
            raise ValidationError("location must not be blank")


@dataclass(frozen=True, slots=True)
class Review:
    id: str
    rating: int
    created_at: datetime
    dealer_id: str | None = None
    vehicle_id: str | None = None
    user_id: str | None = None
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class NewReview:
    rating: int
    dealer_id: str | None = None
    vehicle_id: str | None = None
    user_id: str | None = None
    comment: str | None = None

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If the rating is out of range or nothing is reviewed
        """
        errors: list[FieldError] = []

        if not MIN_RATING <= self.rating <= MAX_RATING:
            errors.append(
                field_error(
                    "rating", f"Must be between {MIN_RATING} and {MAX_RATING}", "INVALID_RANGE"
                )
            )
        if self.dealer_id is None and self.vehicle_id is None:
            errors.append(
                field_error(
                    "dealer_id", "A review must target a dealer or a vehicle", "MISSING_TARGET"
                )
            )

        ValidationError.raise_if_any(errors)


def average_rating(ratings: list[int]) -> Decimal:
    """Straight arithmetic mean, rounded half-up to two places. Empty input rates 0.00."""
    if not ratings:
        return Decimal("0.00")
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return mean.quantize(RATING_QUANTUM, rounding=ROUND_HALF_UP)
