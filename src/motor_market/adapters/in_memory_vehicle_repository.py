from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from motor_market.domain.vehicle import (
    InventoryStatus,
    Paging,
    SearchFilters,
    SortBy,
    Vehicle,
)
from motor_market.ports.vehicle_repository import SearchResult, VehicleRepository


# (key, descending) per sort option; Python's sort is stable so ties keep insertion order
_SORT_KEYS: dict[SortBy, tuple[Callable[[Vehicle], Any], bool]] = {
    SortBy.PRICE_ASC: (lambda v: v.price, False),
    SortBy.PRICE_DESC: (lambda v: v.price, True),
    SortBy.YEAR_DESC: (lambda v: v.year, True),
    SortBy.MILEAGE_ASC: (lambda v: v.mileage, False),
    SortBy.CREATED_DESC: (lambda v: v.created_at, True),
}


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests.

    - Stores vehicles in insertion order
    - Applies AND-semantics filtering
    - Sorts matches, then applies paging
    - Returns total_count of matching vehicles before paging
    """

    def __init__(self, vehicles: list[Vehicle] | None = None) -> None:
        self._vehicles: dict[str, Vehicle] = {v.id: v for v in vehicles or []}

    def add(self, vehicle: Vehicle) -> None:
        self._vehicles[vehicle.id] = vehicle

    def save(self, vehicle: Vehicle) -> None:
        stored = self._vehicles[vehicle.id]
        history = stored.price_history + vehicle.price_history[len(stored.price_history) :]
        self._vehicles[vehicle.id] = replace(vehicle, price_history=history)

    def get_by_id(self, vehicle_id: str, *, for_update: bool = False) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def search(self, filters: SearchFilters, paging: Paging) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [v for v in self._vehicles.values() if self._matches(v, filters)]
        total_count = len(matches)  # Count BEFORE paging

        key, descending = _SORT_KEYS[filters.sort_by]
        matches.sort(key=key, reverse=descending)

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(vehicles=matches[start:end], total_count=total_count)

    def featured(self, limit: int) -> list[Vehicle]:
        candidates = [
            v
            for v in self._vehicles.values()
            if v.available and v.inventory_status is InventoryStatus.IN_STOCK
        ]
        candidates.sort(key=lambda v: v.created_at, reverse=True)
        return candidates[:limit]

    def _matches(self, vehicle: Vehicle, filters: SearchFilters) -> bool:
        if filters.make and filters.make.lower() not in vehicle.make.lower():
            return False
        if filters.model and filters.model.lower() not in vehicle.model.lower():
            return False
        if filters.year_min is not None and vehicle.year < filters.year_min:
            return False
        if filters.year_max is not None and vehicle.year > filters.year_max:
            return False
        if filters.price_min is not None and vehicle.price < filters.price_min:
            return False
        if filters.price_max is not None and vehicle.price > filters.price_max:
            return False
        if filters.max_mileage is not None and vehicle.mileage > filters.max_mileage:
            return False
        if filters.fuel_type is not None and vehicle.fuel_type is not filters.fuel_type:
            return False
        if filters.transmission is not None and vehicle.transmission is not filters.transmission:
            return False
        if filters.body_type is not None and vehicle.body_type is not filters.body_type:
            return False
        if filters.condition is not None and vehicle.condition is not filters.condition:
            return False
        if filters.dealer_id is not None and vehicle.dealer_id != filters.dealer_id:
            return False
        return True
