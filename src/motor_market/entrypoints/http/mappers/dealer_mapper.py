from __future__ import annotations

from motor_market.domain.dealer import Dealer, NewDealer
from motor_market.entrypoints.http.dtos.dealer import (
    DealerCreateDTO,
    DealerListResponseDTO,
    DealerResponseDTO,
)


class DealerMapper:
    @staticmethod
    def to_new_dealer(dto: DealerCreateDTO) -> NewDealer:
        return NewDealer(
            name=dto.name,
            location=dto.location,
            verified=dto.verified,
            description=dto.description,
            phone=dto.phone,
            email=dto.email,
            address=dto.address,
            image_url=dto.image_url,
        )

    @staticmethod
    def to_dealer_response(dealer: Dealer) -> DealerResponseDTO:
        return DealerResponseDTO(
            id=dealer.id,
            name=dealer.name,
            location=dealer.location,
            verified=dealer.verified,
            rating=str(dealer.rating),  # Decimal → str at boundary
            review_count=dealer.review_count,
            description=dealer.description,
            phone=dealer.phone,
            email=dealer.email,
            address=dealer.address,
            image_url=dealer.image_url,
            created_at=dealer.created_at,
        )

    @staticmethod
    def to_list_response(dealers: list[Dealer]) -> DealerListResponseDTO:
        return DealerListResponseDTO(
            dealers=[DealerMapper.to_dealer_response(dealer) for dealer in dealers]
        )
