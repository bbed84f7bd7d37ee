from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from motor_market.domain.errors import FieldError, ValidationError, field_error
from motor_market.domain.vehicle import InventoryStatus


class InventoryAction(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    RESERVED = "reserved"
    SOLD = "sold"
    RETURNED = "returned"
    REMOVED = "removed"
    PRICE_CHANGED = "price_changed"


@dataclass(frozen=True, slots=True)
class InventoryLogEntry:
    """Audit record of one inventory-affecting action. Written once, never updated."""

    id: str
    vehicle_id: str
    dealer_id: str | None
    action: InventoryAction
    new_status: InventoryStatus
    created_at: datetime
    previous_status: InventoryStatus | None = None
    previous_price: Decimal | None = None
    new_price: Decimal | None = None
    notes: str | None = None
    performed_by: str | None = None


# Entries for the other actions are written by the operations that perform them
MANUAL_ACTIONS = frozenset(
    {
        InventoryAction.UPDATED,
        InventoryAction.RESERVED,
        InventoryAction.RETURNED,
        InventoryAction.REMOVED,
    }
)


@dataclass(frozen=True, slots=True)
class NewInventoryLogEntry:
    """
    A log entry recorded by hand, e.g. a dealer noting a vehicle removed from the lot.

    ``dealer_id`` and ``new_status`` default to the vehicle's dealer and status.
    Recording an entry never changes the vehicle itself.
    """

    vehicle_id: str
    action: InventoryAction
    dealer_id: str | None = None
    previous_status: InventoryStatus | None = None
    new_status: InventoryStatus | None = None
    previous_price: Decimal | None = None
    new_price: Decimal | None = None
    notes: str | None = None
    performed_by: str | None = None

    def validate(self) -> None:
        """
        Raises:
            ValidationError: With one entry per offending field
        """
        errors: list[FieldError] = []

        if self.action not in MANUAL_ACTIONS:
            allowed = ", ".join(sorted(action.value for action in MANUAL_ACTIONS))
            errors.append(
                field_error(
                    "action",
                    f"'{self.action.value}' is recorded automatically; use one of {allowed}",
                    "AUTOMATIC_ACTION",
                )
            )
        for name in ("previous_price", "new_price"):
            price = getattr(self, name)
            if price is None:
                continue
            if not isinstance(price, Decimal):
                errors.append(field_error(name, "Must be Decimal", "INVALID_TYPE"))
            elif price < 0:
                errors.append(field_error(name, "Must be >= 0"))

        ValidationError.raise_if_any(errors)
