from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.pricing import PriceCalculation, PriceCalculationRequest
from motor_market.domain.vehicle import Vehicle
from motor_market.ports.vehicle_repository import VehicleRepository
from motor_market.use_cases.calculate_vehicle_price import CalculateVehiclePrice

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecalculateVehiclePriceRequest:
    vehicle_id: str


@dataclass(frozen=True, slots=True)
class RecalculateVehiclePriceResponse:
    vehicle: Vehicle
    calculation: PriceCalculation


class RecalculateVehiclePrice:
    """
    Refresh calculated_price from the vehicle's current attributes.

    The list price and price_history are untouched, so nothing is logged.
    Unlike CreateVehicle there is no fallback: a pricing failure propagates.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        pricing: CalculateVehiclePrice | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._vehicles = vehicle_repository
        self._clock = clock
        self._pricing = pricing or CalculateVehiclePrice(clock=clock)

    def execute(
        self, request: RecalculateVehiclePriceRequest
    ) -> RecalculateVehiclePriceResponse | None:
        vehicle = self._vehicles.get_by_id(request.vehicle_id, for_update=True)
        if vehicle is None:
            return None

        calculation = self._pricing.execute(
            PriceCalculationRequest(
                base_price=vehicle.price,
                mileage=vehicle.mileage,
                year=vehicle.year,
                condition=vehicle.condition,
                make=vehicle.make,
                model=vehicle.model,
                features=vehicle.features,
            )
        )

        updated = replace(
            vehicle,
            calculated_price=calculation.adjusted_price,
            updated_at=self._clock(),
        )
        self._vehicles.save(updated)

        logger.info(
            "Vehicle price recalculated",
            extra={
                "vehicle_id": vehicle.id,
                "previous_calculated_price": str(vehicle.calculated_price),
                "calculated_price": str(updated.calculated_price),
            },
        )

        return RecalculateVehiclePriceResponse(vehicle=updated, calculation=calculation)
