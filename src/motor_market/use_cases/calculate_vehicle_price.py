from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.pricing import (
    ANNUAL_DEPRECIATION_FACTOR,
    CONDITION_DISCOUNTS,
    DEPRECIATION_GRACE_YEARS,
    EXCESS_MILEAGE_RATE,
    EXPECTED_MILES_PER_YEAR,
    LUXURY_BRAND_BONUS_RATE,
    LUXURY_BRANDS,
    MINIMUM_PRICE,
    PREMIUM_FEATURE_BONUS,
    PREMIUM_FEATURES,
    PriceCalculation,
    PriceCalculationRequest,
    PriceFactor,
)


CENTS = Decimal("0.01")
WHOLE_DOLLARS = Decimal("1")


@dataclass(frozen=True, slots=True)
class CalculateVehiclePrice:
    """
    Estimate a vehicle's fair-market price from its list price and attributes.

    Steps run in a fixed order on a running price, so later steps compound on
    earlier ones:

    1. Age depreciation: 5% per year beyond the third, compounded
    2. Mileage penalty: $0.10 per mile above 12,000 miles/year of age
    3. Condition: certified -15%, used -25% of what remains
    4. Premium features: +$1,500 per feature naming a premium keyword
    5. Luxury brand: +10% of the list price

    Rounding policy:
    - All intermediate values keep full Decimal precision
    - Factor adjustments are reported in cents (ROUND_HALF_UP)
    - The final price is rounded to whole dollars (ROUND_HALF_UP) and never
      drops below MINIMUM_PRICE

    The current year comes from ``clock`` so results are reproducible.
    """

    clock: Clock = utc_now

    def execute(self, req: PriceCalculationRequest) -> PriceCalculation:
        req.validate()

        base_price = req.base_price
        price = base_price
        factors: list[PriceFactor] = []

        # A model year ahead of the calendar counts as brand new
        age = max(0, self.clock().year - req.year)

        if age > DEPRECIATION_GRACE_YEARS:
            depreciating_years = age - DEPRECIATION_GRACE_YEARS
            price = base_price * ANNUAL_DEPRECIATION_FACTOR**depreciating_years
            factors.append(
                PriceFactor(
                    name="age",
                    description=f"Age depreciation ({age} years old)",
                    adjustment=_cents(price - base_price),
                )
            )

        expected_mileage = age * EXPECTED_MILES_PER_YEAR
        if req.mileage > expected_mileage:
            excess = req.mileage - expected_mileage
            penalty = Decimal(excess) * EXCESS_MILEAGE_RATE
            price -= penalty
            factors.append(
                PriceFactor(
                    name="mileage",
                    description=f"High mileage ({excess:,} miles above expected)",
                    adjustment=_cents(-penalty),
                )
            )

        discount_rate = CONDITION_DISCOUNTS.get(req.condition)
        if discount_rate is not None:
            price *= Decimal("1") - discount_rate
            factors.append(
                PriceFactor(
                    name="condition",
                    description=f"{req.condition.value.capitalize()} condition",
                    # Displayed against the list price, not the running price
                    adjustment=_cents(-(base_price * discount_rate)),
                )
            )

        premium_count = sum(1 for feature in req.features if _is_premium(feature))
        if premium_count:
            bonus = PREMIUM_FEATURE_BONUS * premium_count
            price += bonus
            factors.append(
                PriceFactor(
                    name="premium_features",
                    description=f"{premium_count} premium feature(s)",
                    adjustment=_cents(bonus),
                )
            )

        if req.make.strip().lower() in LUXURY_BRANDS:
            bonus = base_price * LUXURY_BRAND_BONUS_RATE
            price += bonus
            factors.append(
                PriceFactor(
                    name="luxury_brand",
                    description=f"Luxury brand ({req.make})",
                    adjustment=_cents(bonus),
                )
            )

        adjusted_price = max(MINIMUM_PRICE, price.quantize(WHOLE_DOLLARS, rounding=ROUND_HALF_UP))

        return PriceCalculation(adjusted_price=adjusted_price, factors=tuple(factors))


def _is_premium(feature: str) -> bool:
    label = feature.lower()
    return any(keyword in label for keyword in PREMIUM_FEATURES)


def _cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
