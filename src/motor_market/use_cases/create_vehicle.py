"""Create vehicle use case."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from decimal import Decimal

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.errors import NotFoundError
from motor_market.domain.inventory import InventoryAction, InventoryLogEntry
from motor_market.domain.pricing import PriceCalculationRequest
from motor_market.domain.vehicle import NewVehicle, PriceHistoryEntry, Vehicle
from motor_market.ports.dealer_repository import DealerRepository
from motor_market.ports.inventory_log_repository import InventoryLogRepository
from motor_market.ports.vehicle_repository import VehicleRepository
from motor_market.use_cases.calculate_vehicle_price import CalculateVehiclePrice

logger = logging.getLogger(__name__)

INITIAL_LISTING_REASON = "Initial listing"


@dataclass(frozen=True, slots=True)
class CreateVehicleRequest:
    vehicle: NewVehicle


@dataclass(frozen=True, slots=True)
class CreateVehicleResponse:
    vehicle: Vehicle


class CreateVehicle:
    """
    List a new vehicle in a dealer's inventory.

    Responsibilities:
    - Validate the listing against the current calendar year
    - Require the listing dealer, when given, to exist
    - Estimate calculated_price with the pricing engine, falling back to the
      list price if the engine fails
    - Seed price_history with the list price
    - Record exactly one "added" inventory log entry
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        dealer_repository: DealerRepository,
        inventory_log_repository: InventoryLogRepository,
        pricing: CalculateVehiclePrice | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._vehicles = vehicle_repository
        self._dealers = dealer_repository
        self._logs = inventory_log_repository
        self._clock = clock
        self._pricing = pricing or CalculateVehiclePrice(clock=clock)

    def execute(self, request: CreateVehicleRequest) -> CreateVehicleResponse:
        """
        Raises:
            ValidationError: If the listing is inconsistent (e.g., model year in the future)
            NotFoundError: If the listing dealer does not exist
        """
        data = request.vehicle
        now = self._clock()
        data.validate(current_year=now.year)

        if data.dealer_id is not None and self._dealers.get_by_id(data.dealer_id) is None:
            raise NotFoundError(resource="Dealer", identifier=data.dealer_id)

        vehicle = Vehicle(
            id=str(uuid.uuid4()),
            make=data.make,
            model=data.model,
            year=data.year,
            price=data.price,
            mileage=data.mileage,
            fuel_type=data.fuel_type,
            transmission=data.transmission,
            body_type=data.body_type,
            drivetrain=data.drivetrain,
            condition=data.condition,
            calculated_price=self._estimate_price(data),
            price_history=(
                PriceHistoryEntry(price=data.price, date=now, reason=INITIAL_LISTING_REASON),
            ),
            inventory_status=data.inventory_status,
            stock_quantity=data.stock_quantity,
            available=True,
            dealer_id=data.dealer_id,
            features=data.features,
            engine=data.engine,
            horsepower=data.horsepower,
            color=data.color,
            vin=data.vin,
            description=data.description,
            image_urls=data.image_urls,
            created_at=now,
            updated_at=now,
        )
        self._vehicles.add(vehicle)

        self._logs.append(
            InventoryLogEntry(
                id=str(uuid.uuid4()),
                vehicle_id=vehicle.id,
                dealer_id=vehicle.dealer_id,
                action=InventoryAction.ADDED,
                new_status=vehicle.inventory_status,
                notes="Vehicle added to inventory",
                performed_by=vehicle.dealer_id,
                created_at=now,
            )
        )

        logger.info(
            "Vehicle created",
            extra={
                "vehicle_id": vehicle.id,
                "dealer_id": vehicle.dealer_id,
                "price": str(vehicle.price),
                "calculated_price": str(vehicle.calculated_price),
            },
        )

        return CreateVehicleResponse(vehicle=vehicle)

    def _estimate_price(self, data: NewVehicle) -> Decimal:
        try:
            result = self._pricing.execute(
                PriceCalculationRequest(
                    base_price=data.price,
                    mileage=data.mileage,
                    year=data.year,
                    condition=data.condition,
                    make=data.make,
                    model=data.model,
                    features=data.features,
                )
            )
        except Exception:
            logger.warning(
                "Price calculation failed, using list price",
                exc_info=True,
                extra={"make": data.make, "model": data.model, "price": str(data.price)},
            )
            return data.price

        return result.adjusted_price
