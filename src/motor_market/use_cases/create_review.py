"""Create review use case (with dealer rating aggregation)."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.dealer import NewReview, Review, average_rating
from motor_market.domain.errors import NotFoundError
from motor_market.ports.dealer_repository import DealerRepository
from motor_market.ports.review_repository import ReviewRepository
from motor_market.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateReviewRequest:
    review: NewReview


class CreateReview:
    """
    Store a review and, for dealer reviews, refresh the dealer's aggregates.

    The dealer's rating becomes the plain mean of every rating it has received
    (new review included) and review_count the number of those reviews. The
    dealer is read with for_update=True first, so two reviews for the same
    dealer cannot interleave their read-then-write. Vehicle-only reviews leave
    dealers untouched.
    """

    def __init__(
        self,
        review_repository: ReviewRepository,
        dealer_repository: DealerRepository,
        vehicle_repository: VehicleRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._reviews = review_repository
        self._dealers = dealer_repository
        self._vehicles = vehicle_repository
        self._clock = clock

    def execute(self, request: CreateReviewRequest) -> Review:
        """
        Raises:
            ValidationError: If the rating is out of range or nothing is reviewed
            NotFoundError: If the reviewed dealer or vehicle does not exist
        """
        data = request.review
        data.validate()

        if data.dealer_id is not None:
            if self._dealers.get_by_id(data.dealer_id, for_update=True) is None:
                raise NotFoundError(resource="Dealer", identifier=data.dealer_id)
        if data.vehicle_id is not None:
            if self._vehicles.get_by_id(data.vehicle_id) is None:
                raise NotFoundError(resource="Vehicle", identifier=data.vehicle_id)

        review = Review(
            id=str(uuid.uuid4()),
            rating=data.rating,
            comment=data.comment,
            dealer_id=data.dealer_id,
            vehicle_id=data.vehicle_id,
            user_id=data.user_id,
            created_at=self._clock(),
        )
        self._reviews.add(review)

        if review.dealer_id is not None:
            self._refresh_dealer_rating(review.dealer_id)

        return review

    def _refresh_dealer_rating(self, dealer_id: str) -> None:
        ratings = [r.rating for r in self._reviews.list_by_dealer(dealer_id)]
        rating = average_rating(ratings)
        self._dealers.update_rating(dealer_id, rating=rating, review_count=len(ratings))

        logger.info(
            "Dealer rating recomputed",
            extra={"dealer_id": dealer_id, "rating": str(rating), "review_count": len(ratings)},
        )
