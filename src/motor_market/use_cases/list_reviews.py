from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.dealer import Review
from motor_market.domain.errors import ValidationError
from motor_market.ports.review_repository import ReviewRepository


@dataclass(frozen=True, slots=True)
class ListReviewsRequest:
    dealer_id: str | None = None
    vehicle_id: str | None = None

    def validate(self) -> None:
        if (self.dealer_id is None) == (self.vehicle_id is None):
            raise ValidationError("Exactly one of dealer_id or vehicle_id is required")


class ListReviews:
    """Reviews of a dealer or of a vehicle, newest first."""

    def __init__(self, review_repository: ReviewRepository) -> None:
        self._reviews = review_repository

    def execute(self, request: ListReviewsRequest) -> list[Review]:
        request.validate()

        if request.dealer_id is not None:
            return self._reviews.list_by_dealer(request.dealer_id)
        return self._reviews.list_by_vehicle(request.vehicle_id)  # type: ignore[arg-type]
