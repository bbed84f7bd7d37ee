from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from motor_market.adapters.postgres_helpers import as_uuid, contains_ci, parse_uuid
from motor_market.domain.dealer import Dealer
from motor_market.infra.db.models import DealerRow
from motor_market.ports.dealer_repository import DealerRepository


class PostgresDealerRepository(DealerRepository):
    """PostgreSQL implementation of DealerRepository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, dealer: Dealer) -> None:
        row = DealerRow(
            id=as_uuid(dealer.id),
            name=dealer.name,
            location=dealer.location,
            description=dealer.description,
            phone=dealer.phone,
            email=dealer.email,
            address=dealer.address,
            image_url=dealer.image_url,
            verified=dealer.verified,
            rating=dealer.rating,
            review_count=dealer.review_count,
            created_at=dealer.created_at,
        )
        self._session.add(row)
        self._session.flush()

    def get_by_id(self, dealer_id: str, *, for_update: bool = False) -> Dealer | None:
        key = parse_uuid(dealer_id)
        if key is None:
            return None

        query = select(DealerRow).where(DealerRow.id == key)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)

        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def list_all(self, location: str | None = None) -> list[Dealer]:
        query = select(DealerRow)
        if location:
            query = query.where(contains_ci(DealerRow.location, location))
        query = query.order_by(DealerRow.name, DealerRow.id)

        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def update_rating(self, dealer_id: str, rating: Decimal, review_count: int) -> None:
        # One UPDATE so readers never see a rating without its matching count
        self._session.execute(
            update(DealerRow)
            .where(DealerRow.id == as_uuid(dealer_id))
            .values(rating=rating, review_count=review_count)
        )
        self._session.flush()

    @staticmethod
    def _to_domain(row: DealerRow) -> Dealer:
        return Dealer(
            id=str(row.id),
            name=row.name,
            location=row.location,
            description=row.description,
            phone=row.phone,
            email=row.email,
            address=row.address,
            image_url=row.image_url,
            verified=row.verified,
            rating=row.rating,
            review_count=row.review_count,
            created_at=row.created_at,
        )
