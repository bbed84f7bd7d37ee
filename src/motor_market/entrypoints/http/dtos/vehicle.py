from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from motor_market.domain.vehicle import (
    MAX_PAGE_LIMIT,
    MIN_MODEL_YEAR,
    BodyType,
    Condition,
    Drivetrain,
    FuelType,
    InventoryStatus,
    SortBy,
    Transmission,
)
from motor_market.entrypoints.http.dtos.money import MONEY_PATTERN
from motor_market.entrypoints.http.dtos.pricing import PriceCalculationResponseDTO


class PriceHistoryEntryDTO(BaseModel):
    price: str
    date: datetime
    reason: str


class VehicleResponseDTO(BaseModel):
    id: str
    dealer_id: str | None
    make: str
    model: str
    year: int
    mileage: int
    fuel_type: FuelType
    transmission: Transmission
    body_type: BodyType
    drivetrain: Drivetrain
    condition: Condition
    engine: str | None
    horsepower: int | None
    color: str | None
    vin: str | None
    description: str | None
    features: list[str]
    image_urls: list[str]
    price: str
    calculated_price: str
    price_history: list[PriceHistoryEntryDTO]
    inventory_status: InventoryStatus
    available: bool
    stock_quantity: int
    reserved_by: str | None
    reserved_until: datetime | None
    sold_date: datetime | None
    sold_price: str | None
    created_at: datetime
    updated_at: datetime


class VehicleSearchQueryDTO(BaseModel):
    """Query parameters for searching vehicles."""

    make: str | None = Field(
        default=None,
        description="Filter by make (case-insensitive substring)",
        examples=["Toyota"],
    )
    model: str | None = Field(
        default=None,
        description="Filter by model (case-insensitive substring)",
        examples=["Camry"],
    )
    year_min: int | None = Field(
        default=None,
        description="Minimum model year (inclusive)",
        examples=[2018],
        ge=MIN_MODEL_YEAR,
    )
    year_max: int | None = Field(
        default=None,
        description="Maximum model year (inclusive)",
        examples=[2023],
        ge=MIN_MODEL_YEAR,
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum list price (inclusive, decimal as string)",
        examples=["20000.00"],
        pattern=MONEY_PATTERN,
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum list price (inclusive, decimal as string)",
        examples=["35000.00"],
        pattern=MONEY_PATTERN,
    )
    max_mileage: int | None = Field(
        default=None,
        description="Maximum mileage (inclusive)",
        examples=[60000],
        ge=0,
    )
    fuel_type: FuelType | None = None
    transmission: Transmission | None = None
    body_type: BodyType | None = None
    condition: Condition | None = None
    dealer_id: str | None = Field(default=None, description="Only this dealer's vehicles")
    sort_by: SortBy = Field(default=SortBy.CREATED_DESC, description="Sort order")
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        examples=[20],
        ge=1,
        le=MAX_PAGE_LIMIT,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "year_min": 2018,
                "price_max": "35000.00",
                "fuel_type": "hybrid",
                "sort_by": "price_asc",
                "offset": 0,
                "limit": 20,
            }
        }
    )


class VehicleSearchResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]
    total: int
    offset: int
    limit: int


class FeaturedVehiclesResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]


class VehicleCreateDTO(BaseModel):
    """Request payload for listing a vehicle."""

    make: str = Field(min_length=1, max_length=50, examples=["BMW"])
    model: str = Field(min_length=1, max_length=50, examples=["X5"])
    year: int = Field(examples=[2018])
    price: str = Field(
        description="List price as decimal string",
        examples=["50000.00"],
        pattern=MONEY_PATTERN,
    )
    mileage: int = Field(ge=0, examples=[80000])
    fuel_type: FuelType
    transmission: Transmission
    body_type: BodyType
    drivetrain: Drivetrain
    condition: Condition = Condition.USED
    dealer_id: str | None = None
    features: list[str] = Field(default_factory=list, examples=[["Leather seats", "Sunroof"]])
    engine: str | None = None
    horsepower: int | None = Field(default=None, ge=0)
    color: str | None = None
    vin: str | None = Field(default=None, max_length=17)
    description: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    inventory_status: InventoryStatus = InventoryStatus.IN_STOCK
    stock_quantity: int = Field(default=1, ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "BMW",
                "model": "X5",
                "year": 2018,
                "price": "50000.00",
                "mileage": 80000,
                "fuel_type": "gasoline",
                "transmission": "automatic",
                "body_type": "suv",
                "drivetrain": "awd",
                "condition": "used",
                "features": ["Leather seats", "Sunroof"],
            }
        }
    )


class VehicleUpdateDTO(BaseModel):
    """Partial update. Omitted (or null) fields are left unchanged."""

    price: str | None = Field(default=None, pattern=MONEY_PATTERN, examples=["47500.00"])
    inventory_status: InventoryStatus | None = None
    make: str | None = Field(default=None, min_length=1, max_length=50)
    model: str | None = Field(default=None, min_length=1, max_length=50)
    year: int | None = None
    mileage: int | None = Field(default=None, ge=0)
    fuel_type: FuelType | None = None
    transmission: Transmission | None = None
    body_type: BodyType | None = None
    drivetrain: Drivetrain | None = None
    condition: Condition | None = None
    features: list[str] | None = None
    engine: str | None = None
    horsepower: int | None = Field(default=None, ge=0)
    color: str | None = None
    vin: str | None = Field(default=None, max_length=17)
    description: str | None = None
    image_urls: list[str] | None = None
    stock_quantity: int | None = Field(default=None, ge=0)
    reserved_by: str | None = None
    reserved_until: datetime | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"price": "47500.00", "inventory_status": "reserved", "reserved_by": "jane"}
        }
    )


class RecalculatePriceResponseDTO(BaseModel):
    vehicle: VehicleResponseDTO
    calculation: PriceCalculationResponseDTO
