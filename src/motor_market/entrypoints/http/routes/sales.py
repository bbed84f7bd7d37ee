from fastapi import APIRouter, Depends, status

from motor_market.domain.errors import NotFoundError
from motor_market.entrypoints.http.dependencies import (
    get_record_sale_use_case,
    get_update_sale_use_case,
)
from motor_market.entrypoints.http.dtos.sale import SaleCreateDTO, SaleResponseDTO, SaleUpdateDTO
from motor_market.entrypoints.http.error_responses import (
    CONFLICT_RESPONSE,
    NOT_FOUND_RESPONSE,
    VALIDATION_RESPONSE,
)
from motor_market.entrypoints.http.mappers.sale_mapper import SaleMapper
from motor_market.use_cases.record_sale import RecordSale, RecordSaleRequest
from motor_market.use_cases.update_sale import UpdateSale, UpdateSaleRequest


router = APIRouter(tags=["Sales"])


@router.post(
    "/sales",
    response_model=SaleResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Record a sale",
    description="""
    Record the sale of a vehicle.

    In one transaction:
    - the sale is stored (status pending or completed)
    - the vehicle becomes sold and unavailable, with sold_date and sold_price
    - one "sold" inventory log entry is written

    Selling a vehicle that is already sold (or cannot be sold from its
    current status) answers 409.
    """,
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE, **VALIDATION_RESPONSE},
)
def record_sale(
    payload: SaleCreateDTO,
    use_case: RecordSale = Depends(get_record_sale_use_case),
) -> SaleResponseDTO:
    # 1. Map to domain request (string → Decimal)
    request = RecordSaleRequest(sale=SaleMapper.to_new_sale(payload))

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response (Decimal → string)
    return SaleMapper.to_sale_response(result.sale)


@router.patch(
    "/sales/{sale_id}",
    response_model=SaleResponseDTO,
    summary="Update a sale",
    description="Moving a sale to completed stamps completed_at the first time only.",
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_sale(
    sale_id: str,
    payload: SaleUpdateDTO,
    use_case: UpdateSale = Depends(get_update_sale_use_case),
) -> SaleResponseDTO:
    sale = use_case.execute(UpdateSaleRequest(sale_id=sale_id, patch=SaleMapper.to_patch(payload)))
    if sale is None:
        raise NotFoundError(resource="Sale", identifier=sale_id)
    return SaleMapper.to_sale_response(sale)
