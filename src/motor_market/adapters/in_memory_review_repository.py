from __future__ import annotations

from motor_market.domain.dealer import Review
from motor_market.ports.review_repository import ReviewRepository


class InMemoryReviewRepository(ReviewRepository):
    def __init__(self, reviews: list[Review] | None = None) -> None:
        self._reviews: list[Review] = list(reviews or [])

    def add(self, review: Review) -> None:
        self._reviews.append(review)

    def list_by_dealer(self, dealer_id: str) -> list[Review]:
        return self._newest_first([r for r in self._reviews if r.dealer_id == dealer_id])

    def list_by_vehicle(self, vehicle_id: str) -> list[Review]:
        return self._newest_first([r for r in self._reviews if r.vehicle_id == vehicle_id])

    @staticmethod
    def _newest_first(reviews: list[Review]) -> list[Review]:
        reviews.reverse()
        reviews.sort(key=lambda r: r.created_at, reverse=True)
        return reviews
