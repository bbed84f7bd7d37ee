"""PostgreSQL implementation of VehicleRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import false, func, select
from sqlalchemy.orm import Session

from motor_market.adapters.postgres_helpers import (
    as_uuid,
    contains_ci,
    optional_str,
    optional_uuid,
    parse_uuid,
)
from motor_market.domain.errors import NotFoundError
from motor_market.domain.vehicle import (
    BodyType,
    Condition,
    Drivetrain,
    FuelType,
    InventoryStatus,
    Paging,
    PriceHistoryEntry,
    SearchFilters,
    SortBy,
    Transmission,
    Vehicle,
)
from motor_market.infra.db.models import PriceHistoryRow, VehicleRow
from motor_market.ports.vehicle_repository import SearchResult, VehicleRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


# VehicleRow.id is appended to every ordering so pages are stable
_ORDER_BY = {
    SortBy.PRICE_ASC: VehicleRow.price.asc(),
    SortBy.PRICE_DESC: VehicleRow.price.desc(),
    SortBy.YEAR_DESC: VehicleRow.year.desc(),
    SortBy.MILEAGE_ASC: VehicleRow.mileage.asc(),
    SortBy.CREATED_DESC: VehicleRow.created_at.desc(),
}


class PostgresVehicleRepository(VehicleRepository):
    """
    PostgreSQL implementation of VehicleRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies filters using SQL WHERE clauses, sort keys using ORDER BY
    - Returns total_count via COUNT(*) query
    - Stores price history as append-only rows in vehicle_price_history
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def add(self, vehicle: Vehicle) -> None:
        row = VehicleRow(id=as_uuid(vehicle.id))
        self._copy_columns(vehicle, row)
        row.created_at = vehicle.created_at
        row.price_history = [
            self._history_row(position, entry)
            for position, entry in enumerate(vehicle.price_history)
        ]
        self._session.add(row)
        self._session.flush()

    def save(self, vehicle: Vehicle) -> None:
        row = self._session.get(VehicleRow, as_uuid(vehicle.id))
        if row is None:
            raise NotFoundError(resource="Vehicle", identifier=vehicle.id)

        self._copy_columns(vehicle, row)

        # Append-only: stored positions are never rewritten
        stored = len(row.price_history)
        for position, entry in enumerate(vehicle.price_history[stored:], start=stored):
            row.price_history.append(self._history_row(position, entry))

        self._session.flush()

    def get_by_id(self, vehicle_id: str, *, for_update: bool = False) -> Vehicle | None:
        """
        Get vehicle by ID.

        Args:
            vehicle_id: Vehicle ID (invalid UUIDs simply match nothing)
            for_update: Take a row lock (SELECT ... FOR UPDATE) until commit

        Returns:
            Vehicle entity if found, None otherwise
        """
        key = parse_uuid(vehicle_id)
        if key is None:
            return None

        query = select(VehicleRow).where(VehicleRow.id == key)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)

        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def search(self, filters: SearchFilters, paging: Paging) -> SearchResult:
        """
        Search vehicles with filters, sort order and paging.

        Executes two queries:
        1. COUNT(*) to get total matching vehicles (before paging)
        2. SELECT with ORDER BY/OFFSET/LIMIT to get the requested page

        Note:
            Assumes inputs are validated by UseCase (contract programming).
        """
        query = self._build_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = (
            query.order_by(_ORDER_BY[filters.sort_by], VehicleRow.id)
            .offset(paging.offset)
            .limit(paging.limit)
        )

        rows = self._session.execute(query).scalars().all()
        vehicles = [self._to_domain(row) for row in rows]
        return SearchResult(vehicles=vehicles, total_count=total_count)

    def featured(self, limit: int) -> list[Vehicle]:
        query = (
            select(VehicleRow)
            .where(VehicleRow.available.is_(True))
            .where(VehicleRow.inventory_status == InventoryStatus.IN_STOCK.value)
            .order_by(VehicleRow.created_at.desc(), VehicleRow.id)
            .limit(limit)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def _build_query(self, filters: SearchFilters) -> Select[tuple[VehicleRow]]:
        """
        Build SQLAlchemy query with filters applied (AND semantics).

        Args:
            filters: Filter criteria to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = select(VehicleRow)

        # Case-insensitive substring match for make/model
        if filters.make:
            query = query.where(contains_ci(VehicleRow.make, filters.make))
        if filters.model:
            query = query.where(contains_ci(VehicleRow.model, filters.model))

        # Inclusive ranges
        if filters.year_min is not None:
            query = query.where(VehicleRow.year >= filters.year_min)
        if filters.year_max is not None:
            query = query.where(VehicleRow.year <= filters.year_max)
        if filters.price_min is not None:
            query = query.where(VehicleRow.price >= filters.price_min)
        if filters.price_max is not None:
            query = query.where(VehicleRow.price <= filters.price_max)
        if filters.max_mileage is not None:
            query = query.where(VehicleRow.mileage <= filters.max_mileage)

        # Exact matches
        if filters.fuel_type is not None:
            query = query.where(VehicleRow.fuel_type == filters.fuel_type.value)
        if filters.transmission is not None:
            query = query.where(VehicleRow.transmission == filters.transmission.value)
        if filters.body_type is not None:
            query = query.where(VehicleRow.body_type == filters.body_type.value)
        if filters.condition is not None:
            query = query.where(VehicleRow.condition == filters.condition.value)
        if filters.dealer_id is not None:
            dealer_key = parse_uuid(filters.dealer_id)
            query = query.where(
                VehicleRow.dealer_id == dealer_key if dealer_key is not None else false()
            )

        return query

    @staticmethod
    def _copy_columns(vehicle: Vehicle, row: VehicleRow) -> None:
        row.dealer_id = optional_uuid(vehicle.dealer_id)
        row.make = vehicle.make
        row.model = vehicle.model
        row.year = vehicle.year
        row.mileage = vehicle.mileage
        row.fuel_type = vehicle.fuel_type.value
        row.transmission = vehicle.transmission.value
        row.body_type = vehicle.body_type.value
        row.drivetrain = vehicle.drivetrain.value
        row.condition = vehicle.condition.value
        row.engine = vehicle.engine
        row.horsepower = vehicle.horsepower
        row.color = vehicle.color
        row.vin = vehicle.vin
        row.description = vehicle.description
        row.features = list(vehicle.features)
        row.image_urls = list(vehicle.image_urls)
        row.price = vehicle.price
        row.calculated_price = vehicle.calculated_price
        row.inventory_status = vehicle.inventory_status.value
        row.available = vehicle.available
        row.stock_quantity = vehicle.stock_quantity
        row.reserved_by = vehicle.reserved_by
        row.reserved_until = vehicle.reserved_until
        row.sold_date = vehicle.sold_date
        row.sold_price = vehicle.sold_price
        row.updated_at = vehicle.updated_at

    @staticmethod
    def _history_row(position: int, entry: PriceHistoryEntry) -> PriceHistoryRow:
        return PriceHistoryRow(
            position=position,
            price=entry.price,
            changed_at=entry.date,
            reason=entry.reason,
        )

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Args:
            row: SQLAlchemy VehicleRow model

        Returns:
            Vehicle domain entity
        """
        return Vehicle(
            id=str(row.id),  # Convert UUID to string
            dealer_id=optional_str(row.dealer_id),
            make=row.make,
            model=row.model,
            year=row.year,
            mileage=row.mileage,
            fuel_type=FuelType(row.fuel_type),
            transmission=Transmission(row.transmission),
            body_type=BodyType(row.body_type),
            drivetrain=Drivetrain(row.drivetrain),
            condition=Condition(row.condition),
            engine=row.engine,
            horsepower=row.horsepower,
            color=row.color,
            vin=row.vin,
            description=row.description,
            features=tuple(row.features or ()),
            image_urls=tuple(row.image_urls or ()),
            price=row.price,  # Already Decimal from NUMERIC column
            calculated_price=row.calculated_price,
            price_history=tuple(
                PriceHistoryEntry(price=h.price, date=h.changed_at, reason=h.reason)
                for h in row.price_history
            ),
            inventory_status=InventoryStatus(row.inventory_status),
            available=row.available,
            stock_quantity=row.stock_quantity,
            reserved_by=row.reserved_by,
            reserved_until=row.reserved_until,
            sold_date=row.sold_date,
            sold_price=row.sold_price,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
