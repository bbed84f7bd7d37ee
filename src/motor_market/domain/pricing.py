from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from motor_market.domain.errors import ValidationError
from motor_market.domain.vehicle import Condition


class InvalidPricingInput(ValidationError):
    pass


# Depreciation starts after this many years on the road
DEPRECIATION_GRACE_YEARS = 3
ANNUAL_DEPRECIATION_FACTOR = Decimal("0.95")

EXPECTED_MILES_PER_YEAR = 12000
EXCESS_MILEAGE_RATE = Decimal("0.10")  # dollars per mile over expectation

CONDITION_DISCOUNTS: dict[Condition, Decimal] = {
    Condition.CERTIFIED: Decimal("0.15"),
    Condition.USED: Decimal("0.25"),
}

PREMIUM_FEATURE_BONUS = Decimal("1500")
PREMIUM_FEATURES: tuple[str, ...] = (
    "navigation",
    "leather",
    "sunroof",
    "heated seats",
    "premium audio",
    "backup camera",
    "adaptive cruise",
    "autopilot",
    "panoramic roof",
    "third row",
)

LUXURY_BRAND_BONUS_RATE = Decimal("0.10")
LUXURY_BRANDS: frozenset[str] = frozenset(
    {
        "bmw",
        "mercedes-benz",
        "audi",
        "lexus",
        "porsche",
        "tesla",
        "jaguar",
        "land rover",
        "cadillac",
        "genesis",
    }
)

MINIMUM_PRICE = Decimal("1000")


@dataclass(frozen=True, slots=True)
class PriceCalculationRequest:
    base_price: Decimal
    mileage: int
    year: int
    condition: Condition
    make: str
    model: str
    features: tuple[str, ...] = ()

    def validate(self) -> None:
        if not isinstance(self.base_price, Decimal):
            raise InvalidPricingInput("base_price must be Decimal (no floats past the boundary)")
        if self.base_price < 0:
            raise InvalidPricingInput("base_price must be >= 0")
        if self.mileage < 0:
            raise InvalidPricingInput("mileage must be >= 0")


@dataclass(frozen=True, slots=True)
class PriceFactor:
    name: str
    description: str
    adjustment: Decimal  # signed dollars


@dataclass(frozen=True, slots=True)
class PriceCalculation:
    adjusted_price: Decimal
    factors: tuple[PriceFactor, ...]
