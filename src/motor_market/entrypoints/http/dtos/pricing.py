from pydantic import BaseModel, ConfigDict, Field

from motor_market.domain.vehicle import Condition
from motor_market.entrypoints.http.dtos.money import MONEY_PATTERN


class PriceCalculationRequestDTO(BaseModel):
    """Request payload for estimating a vehicle's market price."""

    base_price: str = Field(
        description="List price as decimal string",
        examples=["50000.00"],
        pattern=MONEY_PATTERN,
    )
    mileage: int = Field(ge=0, examples=[80000])
    year: int = Field(examples=[2018])
    condition: Condition = Field(examples=["used"])
    make: str = Field(min_length=1, examples=["BMW"])
    model: str = Field(min_length=1, examples=["X5"])
    features: list[str] = Field(default_factory=list, examples=[["Leather seats", "Sunroof"]])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "base_price": "50000.00",
                "mileage": 80000,
                "year": 2018,
                "condition": "used",
                "make": "BMW",
                "model": "X5",
                "features": ["Leather seats", "Sunroof"],
            }
        }
    )


class PriceFactorDTO(BaseModel):
    name: str = Field(examples=["age"])
    description: str = Field(examples=["Age depreciation (7 years old)"])
    adjustment: str = Field(
        description="Signed adjustment as decimal string",
        examples=["-9378.13"],
    )


class PriceCalculationResponseDTO(BaseModel):
    adjusted_price: str = Field(
        description="Estimated price in whole dollars as decimal string",
        examples=["41844"],
    )
    factors: list[PriceFactorDTO]
