from fastapi import APIRouter, Depends

from motor_market.entrypoints.http.dependencies import get_calculate_vehicle_price_use_case
from motor_market.entrypoints.http.dtos.pricing import (
    PriceCalculationRequestDTO,
    PriceCalculationResponseDTO,
)
from motor_market.entrypoints.http.error_responses import VALIDATION_RESPONSE
from motor_market.entrypoints.http.mappers.pricing_mapper import PricingMapper
from motor_market.use_cases.calculate_vehicle_price import CalculateVehiclePrice


router = APIRouter(tags=["Pricing"])


@router.post(
    "/pricing/calculate",
    response_model=PriceCalculationResponseDTO,
    summary="Estimate a vehicle's market price",
    description="""
    Estimate a fair-market price from a list price and vehicle attributes.

    ## Adjustments (applied in this order)
    1. Age: -5% per year beyond the third, compounded
    2. Mileage: -$0.10 per mile above 12,000 miles per year of age
    3. Condition: certified -15%, used -25%
    4. Premium features: +$1,500 each (navigation, leather, sunroof, ...)
    5. Luxury brand: +10% of the list price

    The estimate is rounded to whole dollars and never drops below $1,000.
    Each applied adjustment is listed in `factors`.

    ## Example
    ```
    POST /v1/pricing/calculate
    {
        "base_price": "50000.00",
        "mileage": 80000,
        "year": 2018,
        "condition": "used",
        "make": "BMW",
        "model": "X5",
        "features": ["Leather seats", "Sunroof"]
    }
    ```
    """,
    responses={**VALIDATION_RESPONSE},
)
def calculate_price(
    payload: PriceCalculationRequestDTO,
    use_case: CalculateVehiclePrice = Depends(get_calculate_vehicle_price_use_case),
) -> PriceCalculationResponseDTO:
    """Pure calculation: nothing is read or persisted."""
    request = PricingMapper.to_domain_request(payload)
    calculation = use_case.execute(request)
    return PricingMapper.to_response(calculation)
