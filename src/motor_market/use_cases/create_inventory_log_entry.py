"""Create inventory log entry use case."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.errors import ConflictError, NotFoundError
from motor_market.domain.inventory import InventoryLogEntry, NewInventoryLogEntry
from motor_market.ports.dealer_repository import DealerRepository
from motor_market.ports.inventory_log_repository import InventoryLogRepository
from motor_market.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateInventoryLogEntryRequest:
    entry: NewInventoryLogEntry


class CreateInventoryLogEntry:
    """
    Append a hand-recorded entry to a vehicle's inventory log.

    Only updated, reserved, returned and removed entries can be recorded this
    way. The entry is filed under the vehicle's dealer; naming a different
    dealer conflicts. The vehicle is left untouched.
    """

    def __init__(
        self,
        inventory_log_repository: InventoryLogRepository,
        vehicle_repository: VehicleRepository,
        dealer_repository: DealerRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._logs = inventory_log_repository
        self._vehicles = vehicle_repository
        self._dealers = dealer_repository
        self._clock = clock

    def execute(self, request: CreateInventoryLogEntryRequest) -> InventoryLogEntry:
        """
        Raises:
            ValidationError: If the action is one recorded automatically or a price is negative
            NotFoundError: If the vehicle or the named dealer does not exist
            ConflictError: If the named dealer does not list the vehicle
        """
        data = request.entry
        data.validate()

        vehicle = self._vehicles.get_by_id(data.vehicle_id)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=data.vehicle_id)

        dealer_id = vehicle.dealer_id
        if data.dealer_id is not None:
            dealer = self._dealers.get_by_id(data.dealer_id)
            if dealer is None:
                raise NotFoundError(resource="Dealer", identifier=data.dealer_id)
            if vehicle.dealer_id is not None and vehicle.dealer_id != dealer.id:
                raise ConflictError(
                    "Vehicle is listed by another dealer",
                    vehicle_id=vehicle.id,
                    dealer_id=data.dealer_id,
                )
            dealer_id = dealer.id

        entry = InventoryLogEntry(
            id=str(uuid.uuid4()),
            vehicle_id=vehicle.id,
            dealer_id=dealer_id,
            action=data.action,
            previous_status=data.previous_status,
            new_status=data.new_status or vehicle.inventory_status,
            previous_price=data.previous_price,
            new_price=data.new_price,
            notes=data.notes,
            performed_by=data.performed_by,
            created_at=self._clock(),
        )
        self._logs.append(entry)

        logger.info(
            "Inventory log entry recorded",
            extra={
                "entry_id": entry.id,
                "vehicle_id": entry.vehicle_id,
                "dealer_id": entry.dealer_id,
                "action": entry.action.value,
            },
        )

        return entry
