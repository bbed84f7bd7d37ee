from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import InstrumentedAttribute, Session

from motor_market.adapters.postgres_helpers import as_uuid, optional_str, optional_uuid, parse_uuid
from motor_market.domain.dealer import Review
from motor_market.infra.db.models import ReviewRow
from motor_market.ports.review_repository import ReviewRepository


class PostgresReviewRepository(ReviewRepository):
    """PostgreSQL implementation of ReviewRepository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, review: Review) -> None:
        row = ReviewRow(
            id=as_uuid(review.id),
            dealer_id=optional_uuid(review.dealer_id),
            vehicle_id=optional_uuid(review.vehicle_id),
            user_id=review.user_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )
        self._session.add(row)
        self._session.flush()

    def list_by_dealer(self, dealer_id: str) -> list[Review]:
        return self._list_where(ReviewRow.dealer_id, dealer_id)

    def list_by_vehicle(self, vehicle_id: str) -> list[Review]:
        return self._list_where(ReviewRow.vehicle_id, vehicle_id)

    def _list_where(self, column: InstrumentedAttribute, value: str) -> list[Review]:
        key = parse_uuid(value)
        if key is None:
            return []

        query = (
            select(ReviewRow)
            .where(column == key)
            .order_by(ReviewRow.created_at.desc(), ReviewRow.id)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_domain(row: ReviewRow) -> Review:
        return Review(
            id=str(row.id),
            dealer_id=optional_str(row.dealer_id),
            vehicle_id=optional_str(row.vehicle_id),
            user_id=row.user_id,
            rating=row.rating,
            comment=row.comment,
            created_at=row.created_at,
        )
