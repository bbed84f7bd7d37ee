from fastapi import APIRouter, Depends, status

from motor_market.entrypoints.http.dependencies import get_create_inventory_log_entry_use_case
from motor_market.entrypoints.http.dtos.inventory_log import (
    InventoryLogCreateDTO,
    InventoryLogEntryDTO,
)
from motor_market.entrypoints.http.error_responses import (
    CONFLICT_RESPONSE,
    NOT_FOUND_RESPONSE,
    VALIDATION_RESPONSE,
)
from motor_market.entrypoints.http.mappers.inventory_log_mapper import InventoryLogMapper
from motor_market.use_cases.create_inventory_log_entry import (
    CreateInventoryLogEntry,
    CreateInventoryLogEntryRequest,
)


router = APIRouter(tags=["Inventory"])


@router.post(
    "/inventory-logs",
    response_model=InventoryLogEntryDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Record an inventory log entry",
    description="""
    Append an entry to a vehicle's inventory log by hand, e.g. a vehicle
    removed from the lot.

    - `action` must be updated, reserved, returned or removed; added, sold
      and price_changed are logged by the operations that perform them
    - `dealer_id` defaults to the dealer listing the vehicle; another
      dealer answers 409
    - The vehicle itself is not changed
    """,
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE, **VALIDATION_RESPONSE},
)
def create_inventory_log_entry(
    payload: InventoryLogCreateDTO,
    use_case: CreateInventoryLogEntry = Depends(get_create_inventory_log_entry_use_case),
) -> InventoryLogEntryDTO:
    request = CreateInventoryLogEntryRequest(entry=InventoryLogMapper.to_new_entry(payload))
    entry = use_case.execute(request)
    return InventoryLogMapper.to_entry_response(entry)
