"""
Test suite for UpdateVehicle (inventory ledger rules).

Verifies:
- price changes append to price_history and log "price_changed"
- status changes follow the transition table and log once
- attribute-only updates are not logged
- "sold" cannot be reached by a plain update
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable

import pytest

from motor_market.adapters.in_memory_inventory_log_repository import (
    InMemoryInventoryLogRepository,
)
from motor_market.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from motor_market.domain.errors import ConflictError, ValidationError
from motor_market.domain.inventory import InventoryAction
from motor_market.domain.vehicle import (
    InvalidStatusTransition,
    InventoryStatus,
    Vehicle,
    VehiclePatch,
)
from motor_market.use_cases.update_vehicle import UpdateVehicle, UpdateVehicleRequest


@pytest.fixture()
def vehicle(make_vehicle: Callable[..., Vehicle]) -> Vehicle:
    return make_vehicle(price=Decimal("25000.00"))


@pytest.fixture()
def vehicles(vehicle: Vehicle) -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository([vehicle])


@pytest.fixture()
def logs() -> InMemoryInventoryLogRepository:
    return InMemoryInventoryLogRepository()


@pytest.fixture()
def use_case(
    vehicles: InMemoryVehicleRepository,
    logs: InMemoryInventoryLogRepository,
    clock: Callable[[], datetime],
) -> UpdateVehicle:
    return UpdateVehicle(vehicle_repository=vehicles, inventory_log_repository=logs, clock=clock)


def _update(use_case: UpdateVehicle, vehicle_id: str = "v-1", **patch) -> Vehicle | None:
    request = UpdateVehicleRequest(vehicle_id=vehicle_id, patch=VehiclePatch(**patch))
    return use_case.execute(request)


# ==============================================================================
# Price changes
# ==============================================================================


def test_price_change_appends_history_entry(use_case: UpdateVehicle, fixed_now: datetime) -> None:
    updated = _update(use_case, price=Decimal("23500.00"))

    assert updated is not None
    assert updated.price == Decimal("23500.00")
    assert [e.price for e in updated.price_history] == [Decimal("25000.00"), Decimal("23500.00")]
    assert updated.price_history[-1].reason == "Price updated"
    assert updated.price_history[-1].date == fixed_now


def test_price_change_logs_previous_and_new_price(
    use_case: UpdateVehicle, logs: InMemoryInventoryLogRepository
) -> None:
    _update(use_case, price=Decimal("23500.00"))

    [entry] = logs.list_by_vehicle("v-1")
    assert entry.action is InventoryAction.PRICE_CHANGED
    assert entry.previous_price == Decimal("25000.00")
    assert entry.new_price == Decimal("23500.00")


def test_price_history_is_persisted(
    use_case: UpdateVehicle, vehicles: InMemoryVehicleRepository
) -> None:
    _update(use_case, price=Decimal("24000"))
    _update(use_case, price=Decimal("23000"))

    stored = vehicles.get_by_id("v-1")
    assert stored is not None
    assert len(stored.price_history) == 3


def test_same_price_is_not_a_change(
    use_case: UpdateVehicle, logs: InMemoryInventoryLogRepository
) -> None:
    updated = _update(use_case, price=Decimal("25000"))

    assert updated is not None
    assert len(updated.price_history) == 1
    assert logs.list_by_vehicle("v-1") == []


def test_price_and_status_change_log_single_price_entry(
    use_case: UpdateVehicle, logs: InMemoryInventoryLogRepository
) -> None:
    _update(use_case, price=Decimal("24000"), inventory_status=InventoryStatus.LOW_STOCK)

    [entry] = logs.list_by_vehicle("v-1")
    assert entry.action is InventoryAction.PRICE_CHANGED
    assert entry.previous_status is InventoryStatus.IN_STOCK
    assert entry.new_status is InventoryStatus.LOW_STOCK


# ==============================================================================
# Status changes
# ==============================================================================


def test_reserving_logs_reserved(
    use_case: UpdateVehicle, logs: InMemoryInventoryLogRepository
) -> None:
    updated = _update(use_case, inventory_status=InventoryStatus.RESERVED, reserved_by="buyer-7")

    assert updated is not None
    assert updated.inventory_status is InventoryStatus.RESERVED
    assert updated.reserved_by == "buyer-7"
    [entry] = logs.list_by_vehicle("v-1")
    assert entry.action is InventoryAction.RESERVED
    assert entry.previous_status is InventoryStatus.IN_STOCK
    assert entry.previous_price is None


def test_releasing_a_reservation_clears_reservation_fields(
    make_vehicle: Callable[..., Vehicle],
    logs: InMemoryInventoryLogRepository,
    clock: Callable[[], datetime],
) -> None:
    reserved = make_vehicle(inventory_status=InventoryStatus.RESERVED, reserved_by="buyer-7")
    use_case = UpdateVehicle(InMemoryVehicleRepository([reserved]), logs, clock=clock)

    updated = _update(use_case, inventory_status=InventoryStatus.IN_STOCK)

    assert updated is not None
    assert updated.reserved_by is None
    assert logs.list_by_vehicle("v-1")[0].action is InventoryAction.UPDATED


def test_returning_a_sold_vehicle(
    make_vehicle: Callable[..., Vehicle],
    logs: InMemoryInventoryLogRepository,
    clock: Callable[[], datetime],
    fixed_now: datetime,
) -> None:
    sold = make_vehicle(
        inventory_status=InventoryStatus.SOLD,
        available=False,
        sold_date=fixed_now,
        sold_price=Decimal("24000"),
    )
    use_case = UpdateVehicle(InMemoryVehicleRepository([sold]), logs, clock=clock)

    updated = _update(use_case, inventory_status=InventoryStatus.IN_STOCK)

    assert updated is not None
    assert updated.available is True
    assert updated.sold_date is None
    assert updated.sold_price is None
    assert logs.list_by_vehicle("v-1")[0].action is InventoryAction.RETURNED


def test_forbidden_transition_changes_nothing(
    make_vehicle: Callable[..., Vehicle],
    logs: InMemoryInventoryLogRepository,
    clock: Callable[[], datetime],
) -> None:
    vehicle = make_vehicle(inventory_status=InventoryStatus.OUT_OF_STOCK)
    vehicles = InMemoryVehicleRepository([vehicle])
    use_case = UpdateVehicle(vehicles, logs, clock=clock)

    with pytest.raises(InvalidStatusTransition):
        _update(use_case, inventory_status=InventoryStatus.RESERVED, price=Decimal("1"))

    assert vehicles.get_by_id("v-1") == vehicle
    assert logs.list_by_vehicle("v-1") == []


def test_sold_is_only_reachable_by_recording_a_sale(use_case: UpdateVehicle) -> None:
    with pytest.raises(ConflictError, match="recording a sale"):
        _update(use_case, inventory_status=InventoryStatus.SOLD)


# ==============================================================================
# Other updates
# ==============================================================================


def test_attribute_update_is_not_logged(
    use_case: UpdateVehicle, logs: InMemoryInventoryLogRepository, fixed_now: datetime
) -> None:
    updated = _update(use_case, color="Midnight Blue", mileage=31000)

    assert updated is not None
    assert updated.color == "Midnight Blue"
    assert updated.mileage == 31000
    assert updated.updated_at == fixed_now
    assert logs.list_by_vehicle("v-1") == []


def test_unknown_vehicle_returns_none(use_case: UpdateVehicle) -> None:
    assert _update(use_case, vehicle_id="missing", color="Red") is None


def test_invalid_patch_rejected(use_case: UpdateVehicle) -> None:
    with pytest.raises(ValidationError):
        _update(use_case, price=Decimal("-5"))


def test_model_year_past_next_year_rejected(
    use_case: UpdateVehicle, vehicles: InMemoryVehicleRepository
) -> None:
    # Clock year is 2025, so 2026 models are the newest that can be listed
    with pytest.raises(ValidationError, match="year"):
        _update(use_case, year=9999)

    assert vehicles.get_by_id("v-1").year == 2021  # type: ignore[union-attr]


def test_next_model_year_accepted(use_case: UpdateVehicle) -> None:
    updated = _update(use_case, year=2026)

    assert updated is not None
    assert updated.year == 2026
