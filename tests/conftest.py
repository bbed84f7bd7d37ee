"""Shared fixtures: a frozen clock and a Vehicle builder."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from motor_market.domain.vehicle import (
    BodyType,
    Condition,
    Drivetrain,
    FuelType,
    InventoryStatus,
    PriceHistoryEntry,
    Transmission,
    Vehicle,
)


FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    """Clock frozen at FIXED_NOW (current year 2025)."""
    return lambda: FIXED_NOW


def build_vehicle(vehicle_id: str = "v-1", **overrides: Any) -> Vehicle:
    """Vehicle with sensible defaults; ``created_offset`` shifts created_at in minutes."""
    offset = overrides.pop("created_offset", 0)
    created_at = FIXED_NOW - timedelta(days=30) + timedelta(minutes=offset)
    price = overrides.get("price", Decimal("25000.00"))

    vehicle = Vehicle(
        id=vehicle_id,
        make="Toyota",
        model="Camry",
        year=2021,
        price=price,
        mileage=30000,
        fuel_type=FuelType.GASOLINE,
        transmission=Transmission.AUTOMATIC,
        body_type=BodyType.SEDAN,
        drivetrain=Drivetrain.FWD,
        condition=Condition.USED,
        calculated_price=price,
        price_history=(PriceHistoryEntry(price=price, date=created_at, reason="Initial listing"),),
        inventory_status=InventoryStatus.IN_STOCK,
        created_at=created_at,
        updated_at=created_at,
        dealer_id="d-1",
    )
    return replace(vehicle, **overrides)


@pytest.fixture()
def make_vehicle() -> Callable[..., Vehicle]:
    return build_vehicle
