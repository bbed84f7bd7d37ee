from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from motor_market.adapters.postgres_helpers import as_uuid, parse_uuid
from motor_market.domain.analytics import AnalyticsPeriod, DealerAnalytics
from motor_market.infra.db.models import DealerAnalyticsRow
from motor_market.ports.dealer_analytics_repository import DealerAnalyticsRepository


class PostgresDealerAnalyticsRepository(DealerAnalyticsRepository):
    """PostgreSQL implementation of DealerAnalyticsRepository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(
        self, dealer_id: str, period: AnalyticsPeriod, period_date: date
    ) -> DealerAnalytics | None:
        key = parse_uuid(dealer_id)
        if key is None:
            return None

        row = self._find_row(key, period, period_date)
        return self._to_domain(row) if row else None

    def save(self, snapshot: DealerAnalytics) -> None:
        dealer_key = as_uuid(snapshot.dealer_id)
        row = self._find_row(dealer_key, snapshot.period, snapshot.period_date)
        if row is None:
            row = DealerAnalyticsRow(
                id=as_uuid(snapshot.id),
                dealer_id=dealer_key,
                period=snapshot.period.value,
                period_date=snapshot.period_date,
            )
            self._session.add(row)

        row.total_sales = snapshot.total_sales
        row.revenue = snapshot.revenue
        row.total_commission = snapshot.total_commission
        row.average_sale_price = snapshot.average_sale_price
        row.vehicles_listed = snapshot.vehicles_listed
        row.created_at = snapshot.created_at
        self._session.flush()

    def list_by_dealer(self, dealer_id: str, period: AnalyticsPeriod) -> list[DealerAnalytics]:
        key = parse_uuid(dealer_id)
        if key is None:
            return []

        query = (
            select(DealerAnalyticsRow)
            .where(
                DealerAnalyticsRow.dealer_id == key,
                DealerAnalyticsRow.period == period.value,
            )
            .order_by(DealerAnalyticsRow.period_date.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def _find_row(
        self, dealer_key: uuid.UUID, period: AnalyticsPeriod, period_date: date
    ) -> DealerAnalyticsRow | None:
        query = select(DealerAnalyticsRow).where(
            DealerAnalyticsRow.dealer_id == dealer_key,
            DealerAnalyticsRow.period == period.value,
            DealerAnalyticsRow.period_date == period_date,
        )
        return self._session.execute(query).scalar_one_or_none()

    @staticmethod
    def _to_domain(row: DealerAnalyticsRow) -> DealerAnalytics:
        return DealerAnalytics(
            id=str(row.id),
            dealer_id=str(row.dealer_id),
            period=AnalyticsPeriod(row.period),
            period_date=row.period_date,
            total_sales=row.total_sales,
            revenue=row.revenue,
            total_commission=row.total_commission,
            average_sale_price=row.average_sale_price,
            vehicles_listed=row.vehicles_listed,
            created_at=row.created_at,
        )
