"""
Test suite for CreateVehicle.

Verifies:
- calculated_price comes from the pricing engine (fallback: list price)
- price_history starts with the list price
- exactly one "added" inventory log entry is written
- invalid listings are rejected before anything is stored
- a listing naming an unknown dealer is rejected
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Callable
from unittest.mock import Mock

import pytest

from motor_market.adapters.in_memory_dealer_repository import InMemoryDealerRepository
from motor_market.adapters.in_memory_inventory_log_repository import (
    InMemoryInventoryLogRepository,
)
from motor_market.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from motor_market.domain.dealer import Dealer
from motor_market.domain.errors import NotFoundError, ValidationError
from motor_market.domain.inventory import InventoryAction
from motor_market.domain.vehicle import (
    BodyType,
    Condition,
    Drivetrain,
    FuelType,
    InventoryStatus,
    NewVehicle,
    Transmission,
)
from motor_market.use_cases.calculate_vehicle_price import CalculateVehiclePrice
from motor_market.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest


@pytest.fixture()
def vehicles() -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository()


@pytest.fixture()
def dealers(fixed_now: datetime) -> InMemoryDealerRepository:
    return InMemoryDealerRepository(
        [Dealer(id="d-1", name="Bavaria Motors", location="Denver, CO", created_at=fixed_now)]
    )


@pytest.fixture()
def logs() -> InMemoryInventoryLogRepository:
    return InMemoryInventoryLogRepository()


@pytest.fixture()
def use_case(
    vehicles: InMemoryVehicleRepository,
    dealers: InMemoryDealerRepository,
    logs: InMemoryInventoryLogRepository,
    clock: Callable[[], datetime],
) -> CreateVehicle:
    return CreateVehicle(
        vehicle_repository=vehicles,
        dealer_repository=dealers,
        inventory_log_repository=logs,
        clock=clock,
    )


def _bmw(**overrides) -> NewVehicle:
    defaults = dict(
        make="BMW",
        model="X5",
        year=2020,
        price=Decimal("50000"),
        mileage=60000,
        fuel_type=FuelType.GASOLINE,
        transmission=Transmission.AUTOMATIC,
        body_type=BodyType.SUV,
        drivetrain=Drivetrain.AWD,
        condition=Condition.USED,
        dealer_id="d-1",
        features=("Navigation System", "Sunroof"),
    )
    defaults.update(overrides)
    return NewVehicle(**defaults)


# ==============================================================================
# Happy path
# ==============================================================================


def test_create_vehicle_prices_and_stores_it(
    use_case: CreateVehicle, vehicles: InMemoryVehicleRepository, fixed_now: datetime
) -> None:
    vehicle = use_case.execute(CreateVehicleRequest(vehicle=_bmw())).vehicle

    assert vehicle.calculated_price == Decimal("41844")
    assert vehicle.price == Decimal("50000")
    assert vehicle.available is True
    assert vehicle.inventory_status is InventoryStatus.IN_STOCK
    assert vehicle.created_at == fixed_now
    assert vehicle.updated_at == fixed_now
    assert vehicles.get_by_id(vehicle.id) == vehicle


def test_create_vehicle_seeds_price_history(use_case: CreateVehicle, fixed_now: datetime) -> None:
    vehicle = use_case.execute(CreateVehicleRequest(vehicle=_bmw())).vehicle

    assert len(vehicle.price_history) == 1
    entry = vehicle.price_history[0]
    assert entry.price == Decimal("50000")
    assert entry.date == fixed_now
    assert entry.reason == "Initial listing"


def test_create_vehicle_writes_one_added_log_entry(
    use_case: CreateVehicle, logs: InMemoryInventoryLogRepository
) -> None:
    vehicle = use_case.execute(CreateVehicleRequest(vehicle=_bmw())).vehicle

    entries = logs.list_by_vehicle(vehicle.id)
    assert len(entries) == 1
    assert entries[0].action is InventoryAction.ADDED
    assert entries[0].new_status is InventoryStatus.IN_STOCK
    assert entries[0].previous_status is None
    assert entries[0].dealer_id == "d-1"
    assert entries[0].notes == "Vehicle added to inventory"


def test_create_vehicle_keeps_requested_status(use_case: CreateVehicle) -> None:
    request = CreateVehicleRequest(vehicle=_bmw(inventory_status=InventoryStatus.LOW_STOCK))

    vehicle = use_case.execute(request).vehicle

    assert vehicle.inventory_status is InventoryStatus.LOW_STOCK


# ==============================================================================
# Pricing fallback
# ==============================================================================


def test_pricing_failure_falls_back_to_list_price(
    vehicles: InMemoryVehicleRepository,
    dealers: InMemoryDealerRepository,
    logs: InMemoryInventoryLogRepository,
    clock: Callable[[], datetime],
    caplog: pytest.LogCaptureFixture,
) -> None:
    pricing = Mock(spec=CalculateVehiclePrice)
    pricing.execute.side_effect = RuntimeError("pricing offline")
    use_case = CreateVehicle(
        vehicle_repository=vehicles,
        dealer_repository=dealers,
        inventory_log_repository=logs,
        pricing=pricing,
        clock=clock,
    )

    with caplog.at_level("WARNING"):
        vehicle = use_case.execute(CreateVehicleRequest(vehicle=_bmw())).vehicle

    assert vehicle.calculated_price == Decimal("50000")
    assert "Price calculation failed" in caplog.text


# ==============================================================================
# Validation
# ==============================================================================


def test_invalid_listing_stores_nothing(
    use_case: CreateVehicle,
    vehicles: InMemoryVehicleRepository,
    logs: InMemoryInventoryLogRepository,
) -> None:
    with pytest.raises(ValidationError):
        use_case.execute(CreateVehicleRequest(vehicle=_bmw(year=2031)))

    assert vehicles.featured(limit=10) == []
    assert logs.list_by_dealer("d-1") == []


def test_listing_cannot_start_sold(use_case: CreateVehicle) -> None:
    with pytest.raises(ValidationError):
        use_case.execute(CreateVehicleRequest(vehicle=_bmw(inventory_status=InventoryStatus.SOLD)))


def test_unknown_dealer_stores_nothing(
    use_case: CreateVehicle,
    vehicles: InMemoryVehicleRepository,
    logs: InMemoryInventoryLogRepository,
) -> None:
    with pytest.raises(NotFoundError, match="Dealer"):
        use_case.execute(CreateVehicleRequest(vehicle=_bmw(dealer_id="d-missing")))

    assert vehicles.featured(limit=10) == []
    assert logs.list_by_dealer("d-missing") == []


def test_listing_without_dealer_is_accepted(
    use_case: CreateVehicle, logs: InMemoryInventoryLogRepository
) -> None:
    vehicle = use_case.execute(CreateVehicleRequest(vehicle=_bmw(dealer_id=None))).vehicle

    assert vehicle.dealer_id is None
    assert [e.action for e in logs.list_by_vehicle(vehicle.id)] == [InventoryAction.ADDED]
