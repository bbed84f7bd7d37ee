from __future__ import annotations

from motor_market.domain.sale import NewSale, Sale, SalePatch
from motor_market.entrypoints.http.dtos.sale import (
    SaleCreateDTO,
    SaleListResponseDTO,
    SaleResponseDTO,
    SaleUpdateDTO,
)
from motor_market.entrypoints.http.mappers.decimals import parse_decimals


class SaleMapper:
    """Maps between REST DTOs and domain models for sales."""

    @staticmethod
    def to_new_sale(dto: SaleCreateDTO) -> NewSale:
        """
        Raises:
            ValidationError: If sale_price or commission is not a valid decimal
        """
        amounts = parse_decimals({"sale_price": dto.sale_price, "commission": dto.commission})

        return NewSale(
            vehicle_id=dto.vehicle_id,
            dealer_id=dto.dealer_id,
            buyer_name=dto.buyer_name,
            buyer_email=dto.buyer_email,
            buyer_phone=dto.buyer_phone,
            sale_price=amounts["sale_price"],  # type: ignore[arg-type]
            commission=amounts["commission"],  # type: ignore[arg-type]
            payment_method=dto.payment_method,
            status=dto.status,
            notes=dto.notes,
        )

    @staticmethod
    def to_patch(dto: SaleUpdateDTO) -> SalePatch:
        amounts = parse_decimals({"sale_price": dto.sale_price, "commission": dto.commission})

        return SalePatch(
            status=dto.status,
            sale_price=amounts["sale_price"],
            commission=amounts["commission"],
            payment_method=dto.payment_method,
            buyer_name=dto.buyer_name,
            buyer_email=dto.buyer_email,
            buyer_phone=dto.buyer_phone,
            notes=dto.notes,
        )

    @staticmethod
    def to_sale_response(sale: Sale) -> SaleResponseDTO:
        return SaleResponseDTO(
            id=sale.id,
            vehicle_id=sale.vehicle_id,
            dealer_id=sale.dealer_id,
            buyer_name=sale.buyer_name,
            buyer_email=sale.buyer_email,
            buyer_phone=sale.buyer_phone,
            sale_price=str(sale.sale_price),
            commission=str(sale.commission),
            payment_method=sale.payment_method,
            status=sale.status,
            notes=sale.notes,
            created_at=sale.created_at,
            completed_at=sale.completed_at,
        )

    @staticmethod
    def to_list_response(sales: list[Sale]) -> SaleListResponseDTO:
        return SaleListResponseDTO(sales=[SaleMapper.to_sale_response(sale) for sale in sales])
