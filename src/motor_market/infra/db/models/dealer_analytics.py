from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from motor_market.infra.db.models.base import Base


class DealerAnalyticsRow(Base):
    """One row per dealer, period kind and period start; recomputing overwrites it."""

    __tablename__ = "dealer_analytics"
    __table_args__ = (
        UniqueConstraint(
            "dealer_id", "period", "period_date", name="uq_dealer_analytics_dealer_period"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    dealer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("dealers.id"), nullable=False, index=True
    )
    period: Mapped[str] = mapped_column(String(10), nullable=False)
    period_date: Mapped[date] = mapped_column(Date, nullable=False)

    total_sales: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    revenue: Mapped[Decimal] = mapped_column(Numeric(precision=14, scale=2), nullable=False)
    total_commission: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=2), nullable=False
    )
    average_sale_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2), nullable=False
    )
    vehicles_listed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
