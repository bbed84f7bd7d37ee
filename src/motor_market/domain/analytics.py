"""Per-period sales snapshots of a dealer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


CENTS = Decimal("0.01")


class AnalyticsPeriod(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    def bounds(self, day: date) -> tuple[date, date]:
        """
        First day of the period containing ``day`` and first day of the next one.

        Weeks start on Monday.
        """
        if self is AnalyticsPeriod.DAILY:
            return day, day + timedelta(days=1)
        if self is AnalyticsPeriod.WEEKLY:
            start = day - timedelta(days=day.weekday())
            return start, start + timedelta(days=7)
        if self is AnalyticsPeriod.MONTHLY:
            start = day.replace(day=1)
            if start.month == 12:
                return start, start.replace(year=start.year + 1, month=1)
            return start, start.replace(month=start.month + 1)
        start = day.replace(month=1, day=1)
        return start, start.replace(year=start.year + 1)


@dataclass(frozen=True, slots=True)
class DealerAnalytics:
    """
    What a dealer sold and listed in one period.

    Identified by (dealer_id, period, period_date); ``period_date`` is the
    first day of the period. Recomputing a period replaces its snapshot.
    """

    id: str
    dealer_id: str
    period: AnalyticsPeriod
    period_date: date
    total_sales: int
    revenue: Decimal
    total_commission: Decimal
    average_sale_price: Decimal
    vehicles_listed: int
    created_at: datetime


def utc_day(moment: datetime) -> date:
    """Calendar day of ``moment`` in UTC; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(timezone.utc).date()


def average_price(total: Decimal, count: int) -> Decimal:
    if count == 0:
        return Decimal("0.00")
    return (total / count).quantize(CENTS, rounding=ROUND_HALF_UP)
