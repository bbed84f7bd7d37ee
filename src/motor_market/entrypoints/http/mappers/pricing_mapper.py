from __future__ import annotations

from motor_market.domain.pricing import PriceCalculation, PriceCalculationRequest
from motor_market.entrypoints.http.dtos.pricing import (
    PriceCalculationRequestDTO,
    PriceCalculationResponseDTO,
    PriceFactorDTO,
)
from motor_market.entrypoints.http.mappers.decimals import parse_decimals


class PricingMapper:
    """Maps between REST DTOs and domain models for price estimation."""

    @staticmethod
    def to_domain_request(dto: PriceCalculationRequestDTO) -> PriceCalculationRequest:
        """
        Raises:
            ValidationError: If base_price is not a valid decimal
        """
        amounts = parse_decimals({"base_price": dto.base_price})

        return PriceCalculationRequest(
            base_price=amounts["base_price"],  # type: ignore[arg-type]
            mileage=dto.mileage,
            year=dto.year,
            condition=dto.condition,
            make=dto.make,
            model=dto.model,
            features=tuple(dto.features),
        )

    @staticmethod
    def to_response(calculation: PriceCalculation) -> PriceCalculationResponseDTO:
        return PriceCalculationResponseDTO(
            adjusted_price=str(calculation.adjusted_price),
            factors=[
                PriceFactorDTO(
                    name=factor.name,
                    description=factor.description,
                    adjustment=str(factor.adjustment),
                )
                for factor in calculation.factors
            ],
        )
