from __future__ import annotations

from motor_market.domain.vehicle import FEATURED_LIMIT, Vehicle
from motor_market.ports.vehicle_repository import VehicleRepository


class GetFeaturedVehicles:
    """Newest available, in-stock vehicles for the landing page (at most FEATURED_LIMIT)."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self) -> list[Vehicle]:
        return self._repository.featured(limit=FEATURED_LIMIT)
