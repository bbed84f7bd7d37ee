"""
Test suite for PricingMapper.

- Converts the request DTO to PriceCalculationRequest (str → Decimal)
- Converts PriceCalculation to the response DTO (Decimal → str)
- No business logic, just translation
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from motor_market.domain.errors import ValidationError
from motor_market.domain.pricing import PriceCalculation, PriceCalculationRequest, PriceFactor
from motor_market.domain.vehicle import Condition
from motor_market.entrypoints.http.dtos.pricing import PriceCalculationRequestDTO
from motor_market.entrypoints.http.mappers.pricing_mapper import PricingMapper


def test_to_domain_request_with_valid_input() -> None:
    dto = PriceCalculationRequestDTO(
        base_price="50000.00",
        mileage=80000,
        year=2018,
        condition=Condition.USED,
        make="BMW",
        model="X5",
        features=["Leather seats", "Sunroof"],
    )

    request = PricingMapper.to_domain_request(dto)

    assert request == PriceCalculationRequest(
        base_price=Decimal("50000.00"),
        mileage=80000,
        year=2018,
        condition=Condition.USED,
        make="BMW",
        model="X5",
        features=("Leather seats", "Sunroof"),
    )


def test_to_domain_request_handles_whole_numbers() -> None:
    dto = PriceCalculationRequestDTO(
        base_price="25000",
        mileage=0,
        year=2024,
        condition=Condition.NEW,
        make="Kia",
        model="EV6",
    )

    request = PricingMapper.to_domain_request(dto)

    assert request.base_price == Decimal("25000")
    assert request.features == ()


def test_to_domain_request_rejects_unparseable_price() -> None:
    dto = PriceCalculationRequestDTO.model_construct(
        base_price="lots",
        mileage=0,
        year=2024,
        condition=Condition.NEW,
        make="Kia",
        model="EV6",
        features=[],
    )

    with pytest.raises(ValidationError) as exc_info:
        PricingMapper.to_domain_request(dto)

    assert exc_info.value.errors == [
        {
            "field": "base_price",
            "message": "Must be a valid decimal: lots",
            "code": "INVALID_DECIMAL",
        }
    ]


def test_to_response_converts_decimals_to_strings() -> None:
    calculation = PriceCalculation(
        adjusted_price=Decimal("41844"),
        factors=(
            PriceFactor(name="age", description="Age depreciation", adjustment=Decimal("-4875.00")),
            PriceFactor(
                name="luxury_brand", description="Luxury brand", adjustment=Decimal("5000.00")
            ),
        ),
    )

    dto = PricingMapper.to_response(calculation)

    assert dto.adjusted_price == "41844"
    assert [(f.name, f.adjustment) for f in dto.factors] == [
        ("age", "-4875.00"),
        ("luxury_brand", "5000.00"),
    ]


def test_to_response_without_factors() -> None:
    dto = PricingMapper.to_response(PriceCalculation(adjusted_price=Decimal("30000"), factors=()))

    assert dto.model_dump() == {"adjusted_price": "30000", "factors": []}
