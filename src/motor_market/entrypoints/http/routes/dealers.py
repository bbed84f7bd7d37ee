from fastapi import APIRouter, Depends, status

from motor_market.domain.errors import NotFoundError
from motor_market.entrypoints.http.dependencies import (
    get_create_dealer_use_case,
    get_dealer_analytics_use_case,
    get_dealer_by_id_use_case,
    get_inventory_logs_use_case,
    get_list_dealers_use_case,
    get_list_reviews_use_case,
    get_list_sales_use_case,
    get_record_dealer_analytics_use_case,
)
from motor_market.entrypoints.http.dtos.analytics import (
    AnalyticsQueryDTO,
    AnalyticsRecordDTO,
    DealerAnalyticsListResponseDTO,
    DealerAnalyticsResponseDTO,
)
from motor_market.entrypoints.http.dtos.dealer import (
    DealerCreateDTO,
    DealerListQueryDTO,
    DealerListResponseDTO,
    DealerResponseDTO,
)
from motor_market.entrypoints.http.dtos.inventory_log import InventoryLogListResponseDTO
from motor_market.entrypoints.http.dtos.review import ReviewListResponseDTO
from motor_market.entrypoints.http.dtos.sale import SaleListResponseDTO
from motor_market.entrypoints.http.error_responses import NOT_FOUND_RESPONSE, VALIDATION_RESPONSE
from motor_market.entrypoints.http.mappers.analytics_mapper import AnalyticsMapper
from motor_market.entrypoints.http.mappers.dealer_mapper import DealerMapper
from motor_market.entrypoints.http.mappers.inventory_log_mapper import InventoryLogMapper
from motor_market.entrypoints.http.mappers.review_mapper import ReviewMapper
from motor_market.entrypoints.http.mappers.sale_mapper import SaleMapper
from motor_market.use_cases.create_dealer import CreateDealer, CreateDealerRequest
from motor_market.use_cases.get_dealer_analytics import (
    GetDealerAnalytics,
    GetDealerAnalyticsRequest,
)
from motor_market.use_cases.get_dealer_by_id import GetDealerById, GetDealerByIdRequest
from motor_market.use_cases.get_inventory_logs import GetInventoryLogs, GetInventoryLogsRequest
from motor_market.use_cases.list_dealers import ListDealers, ListDealersRequest
from motor_market.use_cases.list_reviews import ListReviews, ListReviewsRequest
from motor_market.use_cases.list_sales import ListSales, ListSalesRequest
from motor_market.use_cases.record_dealer_analytics import (
    RecordDealerAnalytics,
    RecordDealerAnalyticsRequest,
)


router = APIRouter(tags=["Dealers"])


@router.get(
    "/dealers",
    response_model=DealerListResponseDTO,
    summary="List dealers",
)
def list_dealers(
    query: DealerListQueryDTO = Depends(),
    use_case: ListDealers = Depends(get_list_dealers_use_case),
) -> DealerListResponseDTO:
    dealers = use_case.execute(ListDealersRequest(location=query.location))
    return DealerMapper.to_list_response(dealers)


@router.post(
    "/dealers",
    response_model=DealerResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a dealer",
    responses={**VALIDATION_RESPONSE},
)
def create_dealer(
    payload: DealerCreateDTO,
    use_case: CreateDealer = Depends(get_create_dealer_use_case),
) -> DealerResponseDTO:
    dealer = use_case.execute(CreateDealerRequest(dealer=DealerMapper.to_new_dealer(payload)))
    return DealerMapper.to_dealer_response(dealer)


@router.get(
    "/dealers/{dealer_id}",
    response_model=DealerResponseDTO,
    summary="Get a dealer",
    description="Includes the aggregate `rating` (mean of all reviews) and `review_count`.",
    responses={**NOT_FOUND_RESPONSE},
)
def get_dealer(
    dealer_id: str,
    use_case: GetDealerById = Depends(get_dealer_by_id_use_case),
) -> DealerResponseDTO:
    dealer = use_case.execute(GetDealerByIdRequest(dealer_id=dealer_id))
    if dealer is None:
        raise NotFoundError(resource="Dealer", identifier=dealer_id)
    return DealerMapper.to_dealer_response(dealer)


@router.get(
    "/dealers/{dealer_id}/reviews",
    response_model=ReviewListResponseDTO,
    summary="Reviews of a dealer",
)
def get_dealer_reviews(
    dealer_id: str,
    use_case: ListReviews = Depends(get_list_reviews_use_case),
) -> ReviewListResponseDTO:
    reviews = use_case.execute(ListReviewsRequest(dealer_id=dealer_id))
    return ReviewMapper.to_list_response(reviews)


@router.get(
    "/dealers/{dealer_id}/inventory-logs",
    response_model=InventoryLogListResponseDTO,
    summary="Inventory log of a dealer",
)
def get_dealer_inventory_logs(
    dealer_id: str,
    use_case: GetInventoryLogs = Depends(get_inventory_logs_use_case),
) -> InventoryLogListResponseDTO:
    entries = use_case.execute(GetInventoryLogsRequest(dealer_id=dealer_id))
    return InventoryLogMapper.to_list_response(entries)


@router.get(
    "/dealers/{dealer_id}/sales",
    response_model=SaleListResponseDTO,
    summary="Sales of a dealer",
)
def get_dealer_sales(
    dealer_id: str,
    use_case: ListSales = Depends(get_list_sales_use_case),
) -> SaleListResponseDTO:
    sales = use_case.execute(ListSalesRequest(dealer_id=dealer_id))
    return SaleMapper.to_list_response(sales)


@router.get(
    "/dealers/{dealer_id}/analytics",
    response_model=DealerAnalyticsListResponseDTO,
    summary="Analytics of a dealer",
    description="Stored snapshots of one period kind, most recent period first.",
)
def get_dealer_analytics(
    dealer_id: str,
    query: AnalyticsQueryDTO = Depends(),
    use_case: GetDealerAnalytics = Depends(get_dealer_analytics_use_case),
) -> DealerAnalyticsListResponseDTO:
    request = GetDealerAnalyticsRequest(dealer_id=dealer_id, period=query.period)
    snapshots = use_case.execute(request)
    return AnalyticsMapper.to_list_response(snapshots)


@router.post(
    "/dealers/{dealer_id}/analytics",
    response_model=DealerAnalyticsResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Compute a dealer's analytics for one period",
    description="""
    Aggregates the sales completed and vehicles listed inside the period
    containing `day`. Recomputing a period overwrites its snapshot.
    """,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def record_dealer_analytics(
    dealer_id: str,
    payload: AnalyticsRecordDTO,
    use_case: RecordDealerAnalytics = Depends(get_record_dealer_analytics_use_case),
) -> DealerAnalyticsResponseDTO:
    request = RecordDealerAnalyticsRequest(
        dealer_id=dealer_id, period=payload.period, day=payload.day
    )
    return AnalyticsMapper.to_analytics_response(use_case.execute(request))
