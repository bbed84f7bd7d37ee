"""Update vehicle use case (the inventory ledger's mutation path)."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.errors import ConflictError
from motor_market.domain.inventory import InventoryAction, InventoryLogEntry
from motor_market.domain.vehicle import (
    InventoryStatus,
    PriceHistoryEntry,
    Vehicle,
    VehiclePatch,
)
from motor_market.ports.inventory_log_repository import InventoryLogRepository
from motor_market.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)

PRICE_UPDATED_REASON = "Price updated"


@dataclass(frozen=True, slots=True)
class UpdateVehicleRequest:
    vehicle_id: str
    patch: VehiclePatch


class UpdateVehicle:
    """
    Apply a partial update to a vehicle.

    Ledger rules:
    - A price different from the stored one appends a price_history entry and
      logs one "price_changed" entry (previous and new price)
    - A status change without a price change logs one entry: "reserved",
      "returned" (leaving sold) or "updated"
    - Updates touching neither price nor status are not logged
    - Status changes follow InventoryStatus' transition table; "sold" is only
      reachable through RecordSale
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        inventory_log_repository: InventoryLogRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._vehicles = vehicle_repository
        self._logs = inventory_log_repository
        self._clock = clock

    def execute(self, request: UpdateVehicleRequest) -> Vehicle | None:
        """
        Returns:
            The updated vehicle, or None if no vehicle has that ID

        Raises:
            ValidationError: If a patched value is out of range
            ConflictError: If the patch asks for "sold"
            InvalidStatusTransition: If the status change is not allowed
        """
        patch = request.patch
        patch.validate(current_year=self._clock().year)

        current = self._vehicles.get_by_id(request.vehicle_id, for_update=True)
        if current is None:
            return None

        new_status = patch.inventory_status or current.inventory_status
        status_changed = new_status is not current.inventory_status
        price_changed = patch.price is not None and patch.price != current.price

        if status_changed:
            if new_status is InventoryStatus.SOLD:
                raise ConflictError(
                    "Vehicles are marked sold by recording a sale",
                    vehicle_id=current.id,
                )
            current.inventory_status.ensure_can_transition_to(new_status)

        now = self._clock()
        updated = replace(current, **patch.attribute_changes(), updated_at=now)

        if price_changed:
            updated = replace(
                updated,
                price=patch.price,
                price_history=current.price_history
                + (PriceHistoryEntry(price=patch.price, date=now, reason=PRICE_UPDATED_REASON),),
            )
        if status_changed:
            updated = _move_to_status(updated, new_status)

        self._vehicles.save(updated)

        if price_changed:
            self._log(
                current,
                updated,
                InventoryAction.PRICE_CHANGED,
                notes=PRICE_UPDATED_REASON,
                with_prices=True,
            )
            logger.info(
                "Vehicle price changed",
                extra={
                    "vehicle_id": current.id,
                    "previous_price": str(current.price),
                    "new_price": str(updated.price),
                },
            )
        elif status_changed:
            action = _status_action(current.inventory_status, new_status)
            self._log(
                current,
                updated,
                action,
                notes=f"Status changed to {new_status.value}",
                with_prices=False,
            )
            logger.info(
                "Vehicle status changed",
                extra={
                    "vehicle_id": current.id,
                    "previous_status": current.inventory_status.value,
                    "new_status": new_status.value,
                },
            )

        return updated

    def _log(
        self,
        before: Vehicle,
        after: Vehicle,
        action: InventoryAction,
        *,
        notes: str,
        with_prices: bool,
    ) -> None:
        self._logs.append(
            InventoryLogEntry(
                id=str(uuid.uuid4()),
                vehicle_id=after.id,
                dealer_id=after.dealer_id,
                action=action,
                previous_status=before.inventory_status,
                new_status=after.inventory_status,
                previous_price=before.price if with_prices else None,
                new_price=after.price if with_prices else None,
                notes=notes,
                performed_by=after.dealer_id,
                created_at=after.updated_at,
            )
        )


def _move_to_status(vehicle: Vehicle, status: InventoryStatus) -> Vehicle:
    changes: dict[str, object] = {"inventory_status": status}
    if vehicle.inventory_status is InventoryStatus.SOLD:
        changes.update(available=True, sold_date=None, sold_price=None)
    if status is not InventoryStatus.RESERVED:
        changes.update(reserved_by=None, reserved_until=None)
    return replace(vehicle, **changes)


def _status_action(previous: InventoryStatus, new: InventoryStatus) -> InventoryAction:
    if previous is InventoryStatus.SOLD:
        return InventoryAction.RETURNED
    if new is InventoryStatus.RESERVED:
        return InventoryAction.RESERVED
    return InventoryAction.UPDATED
