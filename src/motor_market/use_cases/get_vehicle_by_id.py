"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.vehicle import Vehicle
from motor_market.ports.vehicle_repository import VehicleRepository


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    vehicle_id: str


class GetVehicleById:
    """Read a single vehicle. Unknown IDs yield None, never an exception."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: GetVehicleByIdRequest) -> Vehicle | None:
        return self._repository.get_by_id(request.vehicle_id)
