from __future__ import annotations

from motor_market.domain.dealer import NewReview, Review
from motor_market.entrypoints.http.dtos.review import (
    ReviewCreateDTO,
    ReviewListResponseDTO,
    ReviewResponseDTO,
)


class ReviewMapper:
    @staticmethod
    def to_new_review(dto: ReviewCreateDTO) -> NewReview:
        return NewReview(
            rating=dto.rating,
            dealer_id=dto.dealer_id,
            vehicle_id=dto.vehicle_id,
            user_id=dto.user_id,
            comment=dto.comment,
        )

    @staticmethod
    def to_review_response(review: Review) -> ReviewResponseDTO:
        return ReviewResponseDTO(
            id=review.id,
            rating=review.rating,
            dealer_id=review.dealer_id,
            vehicle_id=review.vehicle_id,
            user_id=review.user_id,
            comment=review.comment,
            created_at=review.created_at,
        )

    @staticmethod
    def to_list_response(reviews: list[Review]) -> ReviewListResponseDTO:
        return ReviewListResponseDTO(
            reviews=[ReviewMapper.to_review_response(review) for review in reviews]
        )
