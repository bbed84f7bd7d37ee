"""
Test suite for the CalculateVehiclePrice pricing engine.

Verifies:
- Each adjustment step and its reported factor
- Step order (condition applies to the already-adjusted price)
- Rounding to whole dollars and the $1,000 floor
- Determinism for a fixed clock
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable

import pytest

from motor_market.domain.pricing import InvalidPricingInput, PriceCalculationRequest
from motor_market.domain.vehicle import Condition
from motor_market.use_cases.calculate_vehicle_price import CalculateVehiclePrice


@pytest.fixture()
def engine(clock: Callable[[], datetime]) -> CalculateVehiclePrice:
    """Engine whose current year is 2025."""
    return CalculateVehiclePrice(clock=clock)


def _request(**overrides) -> PriceCalculationRequest:
    defaults = dict(
        base_price=Decimal("30000"),
        mileage=0,
        year=2025,
        condition=Condition.NEW,
        make="Toyota",
        model="Camry",
    )
    defaults.update(overrides)
    return PriceCalculationRequest(**defaults)


# ==============================================================================
# Full scenario
# ==============================================================================


def test_used_luxury_suv_with_premium_features(engine: CalculateVehiclePrice) -> None:
    """
    50,000 list, 5 years old, 60,000 miles (exactly expected), used, BMW,
    two premium features:

        50000 × 0.95² = 45125
        × 0.75        = 33843.75
        + 2 × 1500    = 36843.75
        + 10% of list = 41843.75 → 41844
    """
    result = engine.execute(
        _request(
            base_price=Decimal("50000"),
            mileage=60000,
            year=2020,
            condition=Condition.USED,
            make="BMW",
            model="X5",
            features=("Navigation System", "Sunroof"),
        )
    )

    assert result.adjusted_price == Decimal("41844")
    assert [f.name for f in result.factors] == [
        "age",
        "condition",
        "premium_features",
        "luxury_brand",
    ]
    assert [f.adjustment for f in result.factors] == [
        Decimal("-4875.00"),
        Decimal("-12500.00"),
        Decimal("3000.00"),
        Decimal("5000.00"),
    ]


def test_same_input_gives_same_output(engine: CalculateVehiclePrice) -> None:
    request = _request(year=2015, mileage=150000, condition=Condition.USED, make="Audi")

    assert engine.execute(request) == engine.execute(request)


# ==============================================================================
# Individual steps
# ==============================================================================


@pytest.mark.parametrize("year", [2022, 2023, 2025])
def test_no_age_factor_within_three_years(engine: CalculateVehiclePrice, year: int) -> None:
    result = engine.execute(_request(year=year))

    assert "age" not in [f.name for f in result.factors]


def test_age_depreciation_compounds(engine: CalculateVehiclePrice) -> None:
    # 10 years old: 7 depreciating years, 0.95^7 = 0.6983372961...
    result = engine.execute(_request(base_price=Decimal("10000"), year=2015, mileage=0))

    assert result.factors[0].name == "age"
    assert result.factors[0].description == "Age depreciation (10 years old)"
    assert result.factors[0].adjustment == Decimal("-3016.63")
    assert result.adjusted_price == Decimal("6983")


def test_mileage_penalty_above_expected(engine: CalculateVehiclePrice) -> None:
    # 1 year old → 12,000 expected; 10,000 excess × $0.10
    result = engine.execute(_request(base_price=Decimal("20000"), year=2024, mileage=22000))

    assert len(result.factors) == 1
    assert result.factors[0].name == "mileage"
    assert result.factors[0].description == "High mileage (10,000 miles above expected)"
    assert result.factors[0].adjustment == Decimal("-1000.00")
    assert result.adjusted_price == Decimal("19000")


def test_no_mileage_penalty_at_expected(engine: CalculateVehiclePrice) -> None:
    result = engine.execute(_request(year=2023, mileage=24000))

    assert result.factors == ()


def test_certified_discount(engine: CalculateVehiclePrice) -> None:
    result = engine.execute(
        _request(
            base_price=Decimal("40000"), year=2024, mileage=5000, condition=Condition.CERTIFIED
        )
    )

    assert [(f.name, f.adjustment) for f in result.factors] == [
        ("condition", Decimal("-6000.00"))
    ]
    assert result.adjusted_price == Decimal("34000")


def test_new_condition_has_no_discount(engine: CalculateVehiclePrice) -> None:
    result = engine.execute(_request())

    assert result.factors == ()
    assert result.adjusted_price == Decimal("30000")


def test_premium_features_match_keywords_case_insensitively(
    engine: CalculateVehiclePrice,
) -> None:
    result = engine.execute(
        _request(features=("LEATHER Seats", "Heated seats", "Bluetooth", "Apple CarPlay"))
    )

    assert [(f.name, f.description, f.adjustment) for f in result.factors] == [
        ("premium_features", "2 premium feature(s)", Decimal("3000.00"))
    ]
    assert result.adjusted_price == Decimal("33000")


@pytest.mark.parametrize("make", ["bmw", "BMW", " Porsche ", "Mercedes-Benz"])
def test_luxury_brand_bonus(engine: CalculateVehiclePrice, make: str) -> None:
    result = engine.execute(_request(base_price=Decimal("30000"), make=make))

    assert result.factors[-1].name == "luxury_brand"
    assert result.factors[-1].adjustment == Decimal("3000.00")
    assert result.adjusted_price == Decimal("33000")


def test_non_luxury_brand_has_no_bonus(engine: CalculateVehiclePrice) -> None:
    result = engine.execute(_request(make="Kia"))

    assert "luxury_brand" not in [f.name for f in result.factors]


# ==============================================================================
# Rounding / floor / edge cases
# ==============================================================================


def test_minimum_price_floor(engine: CalculateVehiclePrice) -> None:
    result = engine.execute(_request(base_price=Decimal("500")))

    assert result.adjusted_price == Decimal("1000")


def test_heavy_mileage_never_goes_below_floor(engine: CalculateVehiclePrice) -> None:
    result = engine.execute(
        _request(base_price=Decimal("3000"), year=2000, mileage=900000, condition=Condition.USED)
    )

    assert result.adjusted_price == Decimal("1000")


def test_rounds_half_up_to_whole_dollars(engine: CalculateVehiclePrice) -> None:
    # 1 year old, 12,005 miles → $0.50 penalty
    result = engine.execute(_request(base_price=Decimal("10000"), year=2024, mileage=12005))

    assert result.adjusted_price == Decimal("10000")  # 9999.50 → 10000


def test_next_model_year_counts_as_brand_new(engine: CalculateVehiclePrice) -> None:
    result = engine.execute(_request(year=2026, mileage=0))

    assert result.factors == ()
    assert result.adjusted_price == Decimal("30000")


def test_invalid_inputs_rejected(engine: CalculateVehiclePrice) -> None:
    with pytest.raises(InvalidPricingInput):
        engine.execute(_request(base_price=Decimal("-1")))
    with pytest.raises(InvalidPricingInput):
        engine.execute(_request(mileage=-1))
    with pytest.raises(InvalidPricingInput):
        engine.execute(_request(base_price=30000.0))  # type: ignore[arg-type]
