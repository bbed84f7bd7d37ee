from __future__ import annotations

from motor_market.domain.vehicle import NewVehicle, Paging, SearchFilters, Vehicle, VehiclePatch
from motor_market.entrypoints.http.dtos.vehicle import (
    FeaturedVehiclesResponseDTO,
    PriceHistoryEntryDTO,
    RecalculatePriceResponseDTO,
    VehicleCreateDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleSearchResponseDTO,
    VehicleUpdateDTO,
)
from motor_market.entrypoints.http.mappers.decimals import money_str, parse_decimals
from motor_market.entrypoints.http.mappers.pricing_mapper import PricingMapper
from motor_market.use_cases.recalculate_vehicle_price import RecalculateVehiclePriceResponse
from motor_market.use_cases.search_vehicles import (
    SearchVehiclesRequest,
    SearchVehiclesResponse,
)


def _optional_tuple(values: list[str] | None) -> tuple[str, ...] | None:
    return tuple(values) if values is not None else None


class VehicleMapper:
    """Maps between REST DTOs and domain models for vehicles."""

    @staticmethod
    def to_domain_filters(dto: VehicleSearchQueryDTO) -> SearchFilters:
        """
        Converts query params to domain filters, handling Decimal conversion.

        Args:
            dto: Search query parameters

        Returns:
            SearchFilters: Domain filters with Decimal prices
        """
        prices = parse_decimals({"price_min": dto.price_min, "price_max": dto.price_max})

        return SearchFilters(
            make=dto.make,
            model=dto.model,
            year_min=dto.year_min,
            year_max=dto.year_max,
            price_min=prices["price_min"],
            price_max=prices["price_max"],
            max_mileage=dto.max_mileage,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            body_type=dto.body_type,
            condition=dto.condition,
            dealer_id=dto.dealer_id,
            sort_by=dto.sort_by,
        )

    @staticmethod
    def to_domain_paging(dto: VehicleSearchQueryDTO) -> Paging:
        return Paging(offset=dto.offset, limit=dto.limit)

    @staticmethod
    def to_search_request(dto: VehicleSearchQueryDTO) -> SearchVehiclesRequest:
        """Convenience method: builds the complete domain request from the DTO."""
        return SearchVehiclesRequest(
            filters=VehicleMapper.to_domain_filters(dto),
            paging=VehicleMapper.to_domain_paging(dto),
        )

    @staticmethod
    def to_new_vehicle(dto: VehicleCreateDTO) -> NewVehicle:
        """
        Raises:
            ValidationError: If price is not a valid decimal
        """
        amounts = parse_decimals({"price": dto.price})

        return NewVehicle(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            price=amounts["price"],  # type: ignore[arg-type]
            mileage=dto.mileage,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            body_type=dto.body_type,
            drivetrain=dto.drivetrain,
            condition=dto.condition,
            dealer_id=dto.dealer_id,
            features=tuple(dto.features),
            engine=dto.engine,
            horsepower=dto.horsepower,
            color=dto.color,
            vin=dto.vin,
            description=dto.description,
            image_urls=tuple(dto.image_urls),
            inventory_status=dto.inventory_status,
            stock_quantity=dto.stock_quantity,
        )

    @staticmethod
    def to_patch(dto: VehicleUpdateDTO) -> VehiclePatch:
        amounts = parse_decimals({"price": dto.price})

        return VehiclePatch(
            price=amounts["price"],
            inventory_status=dto.inventory_status,
            make=dto.make,
            model=dto.model,
            year=dto.year,
            mileage=dto.mileage,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            body_type=dto.body_type,
            drivetrain=dto.drivetrain,
            condition=dto.condition,
            features=_optional_tuple(dto.features),
            engine=dto.engine,
            horsepower=dto.horsepower,
            color=dto.color,
            vin=dto.vin,
            description=dto.description,
            image_urls=_optional_tuple(dto.image_urls),
            stock_quantity=dto.stock_quantity,
            reserved_by=dto.reserved_by,
            reserved_until=dto.reserved_until,
        )

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts a domain Vehicle to its REST representation.

        Handles Decimal → str conversion at the boundary.
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            dealer_id=vehicle.dealer_id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            mileage=vehicle.mileage,
            fuel_type=vehicle.fuel_type,
            transmission=vehicle.transmission,
            body_type=vehicle.body_type,
            drivetrain=vehicle.drivetrain,
            condition=vehicle.condition,
            engine=vehicle.engine,
            horsepower=vehicle.horsepower,
            color=vehicle.color,
            vin=vehicle.vin,
            description=vehicle.description,
            features=list(vehicle.features),
            image_urls=list(vehicle.image_urls),
            price=str(vehicle.price),
            calculated_price=str(vehicle.calculated_price),
            price_history=[
                PriceHistoryEntryDTO(price=str(entry.price), date=entry.date, reason=entry.reason)
                for entry in vehicle.price_history
            ],
            inventory_status=vehicle.inventory_status,
            available=vehicle.available,
            stock_quantity=vehicle.stock_quantity,
            reserved_by=vehicle.reserved_by,
            reserved_until=vehicle.reserved_until,
            sold_date=vehicle.sold_date,
            sold_price=money_str(vehicle.sold_price),
            created_at=vehicle.created_at,
            updated_at=vehicle.updated_at,
        )

    @staticmethod
    def to_search_response(
        result: SearchVehiclesResponse,
        offset: int,
        limit: int,
    ) -> VehicleSearchResponseDTO:
        """
        Converts the domain search result to a REST response with pagination metadata.

        Args:
            result: Domain search result (one page plus total match count)
            offset: Current offset (echoed from request)
            limit: Current limit (echoed from request)
        """
        return VehicleSearchResponseDTO(
            vehicles=[VehicleMapper.to_vehicle_response(v) for v in result.vehicles],
            total=result.total_count,
            offset=offset,
            limit=limit,
        )

    @staticmethod
    def to_featured_response(vehicles: list[Vehicle]) -> FeaturedVehiclesResponseDTO:
        return FeaturedVehiclesResponseDTO(
            vehicles=[VehicleMapper.to_vehicle_response(v) for v in vehicles]
        )

    @staticmethod
    def to_recalculate_response(
        result: RecalculateVehiclePriceResponse,
    ) -> RecalculatePriceResponseDTO:
        return RecalculatePriceResponseDTO(
            vehicle=VehicleMapper.to_vehicle_response(result.vehicle),
            calculation=PricingMapper.to_response(result.calculation),
        )
