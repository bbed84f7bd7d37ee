"""Record sale use case."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.errors import ConflictError, NotFoundError
from motor_market.domain.inventory import InventoryAction, InventoryLogEntry
from motor_market.domain.sale import NewSale, Sale, SaleStatus
from motor_market.domain.vehicle import InventoryStatus
from motor_market.ports.dealer_repository import DealerRepository
from motor_market.ports.inventory_log_repository import InventoryLogRepository
from motor_market.ports.sale_repository import SaleRepository
from motor_market.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecordSaleRequest:
    sale: NewSale


@dataclass(frozen=True, slots=True)
class RecordSaleResponse:
    sale: Sale


class RecordSale:
    """
    Finalize the sale of a vehicle by the dealer that lists it.

    The selling dealer must exist and, when the vehicle is assigned to a
    dealer, be that dealer; the sale and its log entry are filed under it.

    Writes, in order:
    1. The sale record (completed_at stamped if it is created completed)
    2. The vehicle, forced to sold / unavailable with sold_date and sold_price
    3. One "sold" inventory log entry carrying the vehicle's previous status

    The three writes are only atomic when the repositories share a
    transaction (the PostgreSQL adapters share the request session). The
    vehicle is read with for_update=True so concurrent sales of the same
    vehicle serialize and the second one sees it as sold.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        dealer_repository: DealerRepository,
        sale_repository: SaleRepository,
        inventory_log_repository: InventoryLogRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._vehicles = vehicle_repository
        self._dealers = dealer_repository
        self._sales = sale_repository
        self._logs = inventory_log_repository
        self._clock = clock

    def execute(self, request: RecordSaleRequest) -> RecordSaleResponse:
        """
        Raises:
            ValidationError: If the sale data is invalid
            NotFoundError: If the vehicle or the selling dealer does not exist
            ConflictError: If the vehicle belongs to another dealer, is already sold
                or cannot be sold from its status
        """
        data = request.sale
        data.validate()

        vehicle = self._vehicles.get_by_id(data.vehicle_id, for_update=True)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=data.vehicle_id)
        dealer = self._dealers.get_by_id(data.dealer_id)
        if dealer is None:
            raise NotFoundError(resource="Dealer", identifier=data.dealer_id)
        if vehicle.dealer_id is not None and vehicle.dealer_id != dealer.id:
            raise ConflictError(
                "Vehicle is listed by another dealer",
                vehicle_id=vehicle.id,
                dealer_id=data.dealer_id,
            )
        if vehicle.is_sold:
            raise ConflictError("Vehicle is already sold", vehicle_id=vehicle.id)
        vehicle.inventory_status.ensure_can_transition_to(InventoryStatus.SOLD)

        now = self._clock()
        sale = Sale(
            id=str(uuid.uuid4()),
            vehicle_id=data.vehicle_id,
            dealer_id=dealer.id,
            buyer_name=data.buyer_name,
            buyer_email=data.buyer_email,
            buyer_phone=data.buyer_phone,
            sale_price=data.sale_price,
            commission=data.commission,
            payment_method=data.payment_method,
            status=data.status,
            notes=data.notes,
            created_at=now,
            completed_at=now if data.status is SaleStatus.COMPLETED else None,
        )
        self._sales.add(sale)

        sold = replace(
            vehicle,
            inventory_status=InventoryStatus.SOLD,
            available=False,
            sold_date=now,
            sold_price=data.sale_price,
            reserved_by=None,
            reserved_until=None,
            updated_at=now,
        )
        self._vehicles.save(sold)

        self._logs.append(
            InventoryLogEntry(
                id=str(uuid.uuid4()),
                vehicle_id=vehicle.id,
                dealer_id=dealer.id,
                action=InventoryAction.SOLD,
                previous_status=vehicle.inventory_status,
                new_status=InventoryStatus.SOLD,
                notes=f"Sold to {data.buyer_name} for ${data.sale_price}",
                performed_by=dealer.id,
                created_at=now,
            )
        )

        logger.info(
            "Sale recorded",
            extra={
                "sale_id": sale.id,
                "vehicle_id": vehicle.id,
                "dealer_id": dealer.id,
                "sale_price": str(data.sale_price),
                "sale_status": sale.status.value,
            },
        )

        return RecordSaleResponse(sale=sale)
