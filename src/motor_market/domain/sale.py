from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from motor_market.domain.errors import FieldError, ValidationError, field_error


class PaymentMethod(str, Enum):
    CASH = "cash"
    FINANCING = "financing"
    LEASE = "lease"
    TRADE_IN = "trade_in"


class SaleStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


INITIAL_SALE_STATUSES = frozenset({SaleStatus.PENDING, SaleStatus.COMPLETED})


@dataclass(frozen=True, slots=True)
class Sale:
    id: str
    vehicle_id: str
    dealer_id: str
    buyer_name: str
    sale_price: Decimal
    payment_method: PaymentMethod
    status: SaleStatus
    created_at: datetime
    commission: Decimal = Decimal("0")
    buyer_email: str | None = None
    buyer_phone: str | None = None
    notes: str | None = None
    completed_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class NewSale:
    vehicle_id: str
    dealer_id: str
    buyer_name: str
    sale_price: Decimal
    payment_method: PaymentMethod
    status: SaleStatus = SaleStatus.PENDING
    commission: Decimal = Decimal("0")
    buyer_email: str | None = None
    buyer_phone: str | None = None
    notes: str | None = None

    def validate(self) -> None:
        """
        Raises:
            ValidationError: With one entry per offending field
        """
        errors: list[FieldError] = []

        if not isinstance(self.sale_price, Decimal) or self.sale_price <= 0:
            errors.append(field_error("sale_price", "Must be a Decimal > 0"))
        if not isinstance(self.commission, Decimal) or self.commission < 0:
            errors.append(field_error("commission", "Must be a Decimal >= 0"))
        if self.status not in INITIAL_SALE_STATUSES:
            errors.append(field_error("status", "A sale starts as pending or completed"))
        if not self.buyer_name.strip():
            errors.append(field_error("buyer_name", "Must not be blank"))

        ValidationError.raise_if_any(errors)


@dataclass(frozen=True, slots=True)
class SalePatch:
    status: SaleStatus | None = None
    sale_price: Decimal | None = None
    commission: Decimal | None = None
    payment_method: PaymentMethod | None = None
    buyer_name: str | None = None
    buyer_email: str | None = None
    buyer_phone: str | None = None
    notes: str | None = None

    def validate(self) -> None:
        if self.sale_price is not None and self.sale_price <= 0:
            raise ValidationError("sale_price must be > 0")
        if self.commission is not None and self.commission < 0:
            raise ValidationError("commission must be >= 0")
