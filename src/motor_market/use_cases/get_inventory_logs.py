from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.errors import ValidationError
from motor_market.domain.inventory import InventoryLogEntry
from motor_market.ports.inventory_log_repository import InventoryLogRepository


@dataclass(frozen=True, slots=True)
class GetInventoryLogsRequest:
    dealer_id: str | None = None
    vehicle_id: str | None = None

    def validate(self) -> None:
        if (self.dealer_id is None) == (self.vehicle_id is None):
            raise ValidationError("Exactly one of dealer_id or vehicle_id is required")


class GetInventoryLogs:
    """Inventory log of a dealer or of a single vehicle, newest first."""

    def __init__(self, inventory_log_repository: InventoryLogRepository) -> None:
        self._logs = inventory_log_repository

    def execute(self, request: GetInventoryLogsRequest) -> list[InventoryLogEntry]:
        request.validate()

        if request.dealer_id is not None:
            return self._logs.list_by_dealer(request.dealer_id)
        return self._logs.list_by_vehicle(request.vehicle_id)  # type: ignore[arg-type]
