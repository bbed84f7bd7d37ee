from fastapi import APIRouter, Depends, status

from motor_market.domain.errors import NotFoundError
from motor_market.entrypoints.http.dependencies import (
    get_create_vehicle_use_case,
    get_featured_vehicles_use_case,
    get_inventory_logs_use_case,
    get_list_reviews_use_case,
    get_recalculate_vehicle_price_use_case,
    get_search_vehicles_use_case,
    get_update_vehicle_use_case,
    get_vehicle_by_id_use_case,
)
from motor_market.entrypoints.http.dtos.inventory_log import InventoryLogListResponseDTO
from motor_market.entrypoints.http.dtos.review import ReviewListResponseDTO
from motor_market.entrypoints.http.dtos.vehicle import (
    FeaturedVehiclesResponseDTO,
    RecalculatePriceResponseDTO,
    VehicleCreateDTO,
    VehicleResponseDTO,
    VehicleSearchQueryDTO,
    VehicleSearchResponseDTO,
    VehicleUpdateDTO,
)
from motor_market.entrypoints.http.error_responses import (
    CONFLICT_RESPONSE,
    NOT_FOUND_RESPONSE,
    VALIDATION_RESPONSE,
)
from motor_market.entrypoints.http.mappers.inventory_log_mapper import InventoryLogMapper
from motor_market.entrypoints.http.mappers.review_mapper import ReviewMapper
from motor_market.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from motor_market.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest
from motor_market.use_cases.get_featured_vehicles import GetFeaturedVehicles
from motor_market.use_cases.get_inventory_logs import GetInventoryLogs, GetInventoryLogsRequest
from motor_market.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from motor_market.use_cases.list_reviews import ListReviews, ListReviewsRequest
from motor_market.use_cases.recalculate_vehicle_price import (
    RecalculateVehiclePrice,
    RecalculateVehiclePriceRequest,
)
from motor_market.use_cases.search_vehicles import SearchVehicles
from motor_market.use_cases.update_vehicle import UpdateVehicle, UpdateVehicleRequest


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=VehicleSearchResponseDTO,
    summary="Search vehicles",
    description="""
    Search vehicles with optional filters, sort order and pagination.

    ## Filters
    - All filters use AND semantics
    - make/model: case-insensitive substring match
    - year/price: inclusive ranges; max_mileage inclusive
    - fuel_type, transmission, body_type, condition, dealer_id: exact match

    ## Sorting
    `sort_by` is one of price_asc, price_desc, year_desc, mileage_asc,
    created_desc (default).

    ## Pagination
    - Default limit: 20
    - Max limit: 100
    - `total` counts every match, not just the returned page

    ## Example
    ```
    GET /v1/vehicles?make=toyota&price_max=30000.00&sort_by=price_asc&limit=10
    ```
    """,
    responses={**VALIDATION_RESPONSE},
)
def search_vehicles(
    query: VehicleSearchQueryDTO = Depends(),
    use_case: SearchVehicles = Depends(get_search_vehicles_use_case),
) -> VehicleSearchResponseDTO:
    """Search vehicles endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = VehicleMapper.to_search_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return VehicleMapper.to_search_response(result=result, offset=query.offset, limit=query.limit)


# Declared before /vehicles/{vehicle_id} so "featured" is not read as an ID
@router.get(
    "/vehicles/featured",
    response_model=FeaturedVehiclesResponseDTO,
    summary="Featured vehicles",
    description="The newest available, in-stock vehicles (at most 8).",
)
def get_featured_vehicles(
    use_case: GetFeaturedVehicles = Depends(get_featured_vehicles_use_case),
) -> FeaturedVehiclesResponseDTO:
    return VehicleMapper.to_featured_response(use_case.execute())


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Get a vehicle",
    responses={**NOT_FOUND_RESPONSE},
)
def get_vehicle(
    vehicle_id: str,
    use_case: GetVehicleById = Depends(get_vehicle_by_id_use_case),
) -> VehicleResponseDTO:
    vehicle = use_case.execute(GetVehicleByIdRequest(vehicle_id=vehicle_id))
    if vehicle is None:
        raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
    return VehicleMapper.to_vehicle_response(vehicle)


@router.post(
    "/vehicles",
    response_model=VehicleResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="List a vehicle",
    description="""
    Add a vehicle to inventory.

    - `calculated_price` is estimated by the pricing engine (falls back to
      the list price if the estimate cannot be made)
    - `price_history` starts with the list price
    - One "added" inventory log entry is written
    """,
    responses={**VALIDATION_RESPONSE},
)
def create_vehicle(
    payload: VehicleCreateDTO,
    use_case: CreateVehicle = Depends(get_create_vehicle_use_case),
) -> VehicleResponseDTO:
    # 1. Map to domain request (string → Decimal)
    request = CreateVehicleRequest(vehicle=VehicleMapper.to_new_vehicle(payload))

    # 2. Execute use case (validates, prices, persists, logs)
    result = use_case.execute(request)

    # 3. Map to response (Decimal → string)
    return VehicleMapper.to_vehicle_response(result.vehicle)


@router.patch(
    "/vehicles/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Update a vehicle",
    description="""
    Partially update a vehicle.

    - A new price is appended to `price_history` and logged as "price_changed"
    - Status changes follow the inventory transition rules; a forbidden
      transition answers 409. Vehicles are marked sold by recording a sale.
    """,
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE, **VALIDATION_RESPONSE},
)
def update_vehicle(
    vehicle_id: str,
    payload: VehicleUpdateDTO,
    use_case: UpdateVehicle = Depends(get_update_vehicle_use_case),
) -> VehicleResponseDTO:
    request = UpdateVehicleRequest(vehicle_id=vehicle_id, patch=VehicleMapper.to_patch(payload))
    vehicle = use_case.execute(request)
    if vehicle is None:
        raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
    return VehicleMapper.to_vehicle_response(vehicle)


@router.post(
    "/vehicles/{vehicle_id}/recalculate-price",
    response_model=RecalculatePriceResponseDTO,
    summary="Recalculate a vehicle's estimated price",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def recalculate_vehicle_price(
    vehicle_id: str,
    use_case: RecalculateVehiclePrice = Depends(get_recalculate_vehicle_price_use_case),
) -> RecalculatePriceResponseDTO:
    result = use_case.execute(RecalculateVehiclePriceRequest(vehicle_id=vehicle_id))
    if result is None:
        raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
    return VehicleMapper.to_recalculate_response(result)


@router.get(
    "/vehicles/{vehicle_id}/inventory-logs",
    response_model=InventoryLogListResponseDTO,
    summary="Inventory log of a vehicle",
)
def get_vehicle_inventory_logs(
    vehicle_id: str,
    use_case: GetInventoryLogs = Depends(get_inventory_logs_use_case),
) -> InventoryLogListResponseDTO:
    entries = use_case.execute(GetInventoryLogsRequest(vehicle_id=vehicle_id))
    return InventoryLogMapper.to_list_response(entries)


@router.get(
    "/vehicles/{vehicle_id}/reviews",
    response_model=ReviewListResponseDTO,
    summary="Reviews of a vehicle",
)
def get_vehicle_reviews(
    vehicle_id: str,
    use_case: ListReviews = Depends(get_list_reviews_use_case),
) -> ReviewListResponseDTO:
    reviews = use_case.execute(ListReviewsRequest(vehicle_id=vehicle_id))
    return ReviewMapper.to_list_response(reviews)
