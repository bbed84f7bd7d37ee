from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from motor_market.domain.sale import PaymentMethod, SaleStatus
from motor_market.entrypoints.http.dtos.money import MONEY_PATTERN


class SaleCreateDTO(BaseModel):
    vehicle_id: str
    dealer_id: str
    buyer_name: str = Field(min_length=1, max_length=100, examples=["Jane Doe"])
    buyer_email: str | None = Field(default=None, max_length=255)
    buyer_phone: str | None = Field(default=None, max_length=30)
    sale_price: str = Field(
        description="Agreed price as decimal string",
        examples=["42000.00"],
        pattern=MONEY_PATTERN,
    )
    commission: str = Field(default="0", pattern=MONEY_PATTERN, examples=["1260.00"])
    payment_method: PaymentMethod
    status: SaleStatus = Field(
        default=SaleStatus.PENDING,
        description="Initial status: pending or completed",
    )
    notes: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_id": "550e8400-e29b-41d4-a716-446655440000",
                "dealer_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "buyer_name": "Jane Doe",
                "sale_price": "42000.00",
                "payment_method": "financing",
                "status": "completed",
            }
        }
    )


class SaleUpdateDTO(BaseModel):
    status: SaleStatus | None = None
    sale_price: str | None = Field(default=None, pattern=MONEY_PATTERN)
    commission: str | None = Field(default=None, pattern=MONEY_PATTERN)
    payment_method: PaymentMethod | None = None
    buyer_name: str | None = Field(default=None, min_length=1, max_length=100)
    buyer_email: str | None = Field(default=None, max_length=255)
    buyer_phone: str | None = Field(default=None, max_length=30)
    notes: str | None = None


class SaleResponseDTO(BaseModel):
    id: str
    vehicle_id: str
    dealer_id: str
    buyer_name: str
    buyer_email: str | None
    buyer_phone: str | None
    sale_price: str
    commission: str
    payment_method: PaymentMethod
    status: SaleStatus
    notes: str | None
    created_at: datetime
    completed_at: datetime | None


class SaleListResponseDTO(BaseModel):
    sales: list[SaleResponseDTO]
