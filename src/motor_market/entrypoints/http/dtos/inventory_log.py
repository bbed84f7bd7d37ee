from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from motor_market.domain.inventory import InventoryAction
from motor_market.domain.vehicle import InventoryStatus
from motor_market.entrypoints.http.dtos.money import MONEY_PATTERN


class InventoryLogEntryDTO(BaseModel):
    id: str
    vehicle_id: str
    dealer_id: str | None
    action: InventoryAction
    previous_status: InventoryStatus | None
    new_status: InventoryStatus
    previous_price: str | None
    new_price: str | None
    notes: str | None
    performed_by: str | None
    created_at: datetime


class InventoryLogListResponseDTO(BaseModel):
    logs: list[InventoryLogEntryDTO]


class InventoryLogCreateDTO(BaseModel):
    """
    Request payload for recording an inventory log entry by hand.

    Only updated, reserved, returned and removed can be recorded; the other
    actions are logged by the operations that perform them.
    """

    vehicle_id: str
    action: InventoryAction
    dealer_id: str | None = Field(
        default=None, description="Defaults to the dealer listing the vehicle"
    )
    previous_status: InventoryStatus | None = None
    new_status: InventoryStatus | None = Field(
        default=None, description="Defaults to the vehicle's current status"
    )
    previous_price: str | None = Field(default=None, pattern=MONEY_PATTERN)
    new_price: str | None = Field(default=None, pattern=MONEY_PATTERN)
    notes: str | None = None
    performed_by: str | None = Field(default=None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_id": "550e8400-e29b-41d4-a716-446655440000",
                "action": "removed",
                "notes": "Sent to auction",
                "performed_by": "lot-manager",
            }
        }
    )
