"""
Test suite for InMemoryVehicleRepository.

This suite is the reference for the VehicleRepository contract: the Postgres
adapter is expected to return the same vehicles in the same order.

Test sections:
- Filter Edge Cases: substring make/model, inclusive ranges, exact enums
- Sorting: every SortBy option
- Paging: total_count before paging, offset past the end
- Persistence: add/save/get_by_id, append-only price history
- Featured: availability, status and recency
"""

from __future__ import annotations

from dataclasses import replace
from datetime import timedelta
from decimal import Decimal
from typing import Callable

import pytest

from motor_market.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from motor_market.domain.vehicle import (
    BodyType,
    Condition,
    FuelType,
    InventoryStatus,
    Paging,
    PriceHistoryEntry,
    SearchFilters,
    SortBy,
    Transmission,
    Vehicle,
)


@pytest.fixture()
def vehicles(make_vehicle: Callable[..., Vehicle]) -> list[Vehicle]:
    return [
        make_vehicle("1", make="Toyota", model="Corolla", year=2018, price=Decimal("15000.00"),
                     mileage=80000, created_offset=1),
        make_vehicle("2", make="Toyota", model="Camry", year=2020, price=Decimal("22000.00"),
                     mileage=40000, created_offset=2, fuel_type=FuelType.HYBRID),
        make_vehicle("3", make="Honda", model="Civic", year=2019, price=Decimal("18000.00"),
                     mileage=55000, created_offset=3, transmission=Transmission.MANUAL),
        make_vehicle("4", make="Mercedes-Benz", model="GLC", year=2022, price=Decimal("48000.00"),
                     mileage=12000, created_offset=4, body_type=BodyType.SUV,
                     condition=Condition.CERTIFIED, dealer_id="d-2"),
        make_vehicle("5", make="TOYOTA", model="corolla cross", year=2023,
                     price=Decimal("27000.00"), mileage=5000, created_offset=5,
                     body_type=BodyType.SUV),
    ]


def ids(found: list[Vehicle]) -> list[str]:
    return [v.id for v in found]


# ==============================================================================
# Filter Edge Cases
# ==============================================================================


def test_search_make_is_case_insensitive_substring(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(
        SearchFilters(make="toy", sort_by=SortBy.PRICE_ASC), Paging(offset=0, limit=50)
    )

    assert ids(result.vehicles) == ["1", "2", "5"]


def test_search_model_substring_matches_longer_names(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(
        SearchFilters(model="COROLLA", sort_by=SortBy.PRICE_ASC), Paging(offset=0, limit=50)
    )

    assert ids(result.vehicles) == ["1", "5"]


def test_search_make_with_hyphen_matches(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(SearchFilters(make="benz"), Paging())

    assert ids(result.vehicles) == ["4"]


def test_search_ranges_are_inclusive(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(
        SearchFilters(
            year_min=2019,
            year_max=2022,
            price_min=Decimal("18000.00"),
            price_max=Decimal("48000.00"),
            sort_by=SortBy.PRICE_ASC,
        ),
        Paging(),
    )

    assert ids(result.vehicles) == ["3", "2", "4"]


def test_search_max_mileage_is_inclusive(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(
        SearchFilters(max_mileage=12000, sort_by=SortBy.MILEAGE_ASC), Paging()
    )

    assert ids(result.vehicles) == ["5", "4"]


def test_search_exact_enum_filters_combine_with_and(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    suvs = repo.search(SearchFilters(body_type=BodyType.SUV), Paging())
    certified_suvs = repo.search(
        SearchFilters(body_type=BodyType.SUV, condition=Condition.CERTIFIED), Paging()
    )

    assert sorted(ids(suvs.vehicles)) == ["4", "5"]
    assert ids(certified_suvs.vehicles) == ["4"]


@pytest.mark.parametrize(
    ("filters", "expected"),
    [
        (SearchFilters(fuel_type=FuelType.HYBRID), ["2"]),
        (SearchFilters(transmission=Transmission.MANUAL), ["3"]),
        (SearchFilters(dealer_id="d-2"), ["4"]),
        (SearchFilters(dealer_id="unknown"), []),
    ],
)
def test_search_single_exact_filter(
    vehicles: list[Vehicle], filters: SearchFilters, expected: list[str]
) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    assert ids(repo.search(filters, Paging()).vehicles) == expected


def test_search_without_filters_returns_everything(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(SearchFilters(), Paging(offset=0, limit=100))

    assert result.total_count == 5
    assert len(result.vehicles) == 5


def test_search_no_matches(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(SearchFilters(make="Ferrari"), Paging())

    assert result.vehicles == []
    assert result.total_count == 0


# ==============================================================================
# Sorting
# ==============================================================================


@pytest.mark.parametrize(
    ("sort_by", "expected"),
    [
        (SortBy.PRICE_ASC, ["1", "3", "2", "5", "4"]),
        (SortBy.PRICE_DESC, ["4", "5", "2", "3", "1"]),
        (SortBy.YEAR_DESC, ["5", "4", "2", "3", "1"]),
        (SortBy.MILEAGE_ASC, ["5", "4", "2", "3", "1"]),
        (SortBy.CREATED_DESC, ["5", "4", "3", "2", "1"]),
    ],
)
def test_search_sort_orders(
    vehicles: list[Vehicle], sort_by: SortBy, expected: list[str]
) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(SearchFilters(sort_by=sort_by), Paging())

    assert ids(result.vehicles) == expected


# ==============================================================================
# Paging
# ==============================================================================


def test_search_total_count_is_before_paging(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(
        SearchFilters(sort_by=SortBy.PRICE_ASC), Paging(offset=1, limit=2)
    )

    assert ids(result.vehicles) == ["3", "2"]
    assert result.total_count == 5


def test_search_offset_past_end_returns_empty_page(vehicles: list[Vehicle]) -> None:
    repo = InMemoryVehicleRepository(vehicles)

    result = repo.search(SearchFilters(), Paging(offset=10, limit=5))

    assert result.vehicles == []
    assert result.total_count == 5


def test_search_empty_repository() -> None:
    repo = InMemoryVehicleRepository()

    result = repo.search(SearchFilters(), Paging())

    assert result.vehicles == []
    assert result.total_count == 0


# ==============================================================================
# Persistence
# ==============================================================================


def test_add_then_get_by_id(make_vehicle: Callable[..., Vehicle]) -> None:
    repo = InMemoryVehicleRepository()
    vehicle = make_vehicle("abc")

    repo.add(vehicle)

    assert repo.get_by_id("abc") == vehicle
    assert repo.get_by_id("abc", for_update=True) == vehicle


def test_get_by_id_unknown_returns_none() -> None:
    assert InMemoryVehicleRepository().get_by_id("missing") is None


def test_save_appends_new_history_entries(make_vehicle: Callable[..., Vehicle]) -> None:
    vehicle = make_vehicle("v-1")
    repo = InMemoryVehicleRepository([vehicle])
    changed_at = vehicle.created_at + timedelta(days=1)
    new_entry = PriceHistoryEntry(price=Decimal("23000.00"), date=changed_at, reason="Price drop")

    repo.save(
        replace(
            vehicle,
            price=Decimal("23000.00"),
            price_history=vehicle.price_history + (new_entry,),
        )
    )

    stored = repo.get_by_id("v-1")
    assert stored is not None
    assert stored.price == Decimal("23000.00")
    assert [h.price for h in stored.price_history] == [Decimal("25000.00"), Decimal("23000.00")]


def test_save_never_rewrites_stored_history(make_vehicle: Callable[..., Vehicle]) -> None:
    vehicle = make_vehicle("v-1")
    repo = InMemoryVehicleRepository([vehicle])
    tampered = PriceHistoryEntry(price=Decimal("1.00"), date=vehicle.created_at, reason="Edited")

    repo.save(replace(vehicle, price_history=(tampered,)))

    stored = repo.get_by_id("v-1")
    assert stored is not None
    assert stored.price_history == vehicle.price_history


# ==============================================================================
# Featured
# ==============================================================================


def test_featured_returns_newest_available_in_stock(make_vehicle: Callable[..., Vehicle]) -> None:
    repo = InMemoryVehicleRepository(
        [
            make_vehicle("old", created_offset=1),
            make_vehicle("new", created_offset=5),
            make_vehicle("hidden", created_offset=9, available=False),
            make_vehicle("reserved", created_offset=8, inventory_status=InventoryStatus.RESERVED),
            make_vehicle("low", created_offset=7, inventory_status=InventoryStatus.LOW_STOCK),
        ]
    )

    assert ids(repo.featured(limit=8)) == ["new", "old"]


def test_featured_respects_limit(make_vehicle: Callable[..., Vehicle]) -> None:
    repo = InMemoryVehicleRepository(
        [make_vehicle(f"v-{i}", created_offset=i) for i in range(5)]
    )

    assert ids(repo.featured(limit=2)) == ["v-4", "v-3"]
