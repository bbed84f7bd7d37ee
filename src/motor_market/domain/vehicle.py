from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal
from enum import Enum

from motor_market.domain.errors import ConflictError, FieldError, ValidationError, field_error


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class InvalidStatusTransition(ConflictError):
    """Raised when a vehicle cannot move from its current inventory status to the requested one."""

    pass


# ==============================================================================
# Enumerations
# ==============================================================================


class FuelType(str, Enum):
    GASOLINE = "gasoline"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"


class Transmission(str, Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"
    CVT = "cvt"


class BodyType(str, Enum):
    SEDAN = "sedan"
    SUV = "suv"
    HATCHBACK = "hatchback"
    CONVERTIBLE = "convertible"
    PICKUP = "pickup"
    COUPE = "coupe"
    WAGON = "wagon"
    VAN = "van"


class Drivetrain(str, Enum):
    FWD = "fwd"
    RWD = "rwd"
    AWD = "awd"
    FOUR_WD = "4wd"


class Condition(str, Enum):
    NEW = "new"
    USED = "used"
    CERTIFIED = "certified"


class InventoryStatus(str, Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    RESERVED = "reserved"
    SOLD = "sold"

    def can_transition_to(self, target: InventoryStatus) -> bool:
        return target is self or target in _ALLOWED_TRANSITIONS[self]

    def ensure_can_transition_to(self, target: InventoryStatus) -> None:
        """
        Raises:
            InvalidStatusTransition: If the table below has no edge self -> target
        """
        if not self.can_transition_to(target):
            raise InvalidStatusTransition(
                f"Cannot change inventory status from '{self.value}' to '{target.value}'",
                previous_status=self.value,
                new_status=target.value,
            )


_ALLOWED_TRANSITIONS: dict[InventoryStatus, frozenset[InventoryStatus]] = {
    InventoryStatus.IN_STOCK: frozenset(
        {
            InventoryStatus.LOW_STOCK,
            InventoryStatus.OUT_OF_STOCK,
            InventoryStatus.RESERVED,
            InventoryStatus.SOLD,
        }
    ),
    InventoryStatus.LOW_STOCK: frozenset(
        {
            InventoryStatus.IN_STOCK,
            InventoryStatus.OUT_OF_STOCK,
            InventoryStatus.RESERVED,
            InventoryStatus.SOLD,
        }
    ),
    InventoryStatus.OUT_OF_STOCK: frozenset({InventoryStatus.IN_STOCK, InventoryStatus.LOW_STOCK}),
    InventoryStatus.RESERVED: frozenset(
        {InventoryStatus.IN_STOCK, InventoryStatus.LOW_STOCK, InventoryStatus.SOLD}
    ),
    # A sold vehicle only comes back through a return
    InventoryStatus.SOLD: frozenset({InventoryStatus.IN_STOCK}),
}


class SortBy(str, Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    YEAR_DESC = "year_desc"
    MILEAGE_ASC = "mileage_asc"
    CREATED_DESC = "created_desc"


MIN_MODEL_YEAR = 1886
MAX_PAGE_LIMIT = 100
FEATURED_LIMIT = 8


# ==============================================================================
# Entities
# ==============================================================================


@dataclass(frozen=True, slots=True)
class PriceHistoryEntry:
    price: Decimal
    date: datetime
    reason: str


@dataclass(frozen=True)
class Vehicle:
    id: str
    make: str
    model: str
    year: int
    price: Decimal
    mileage: int
    fuel_type: FuelType
    transmission: Transmission
    body_type: BodyType
    drivetrain: Drivetrain
    condition: Condition
    calculated_price: Decimal
    price_history: tuple[PriceHistoryEntry, ...]
    inventory_status: InventoryStatus
    created_at: datetime
    updated_at: datetime
    available: bool = True
    stock_quantity: int = 1
    dealer_id: str | None = None
    features: tuple[str, ...] = ()
    engine: str | None = None
    horsepower: int | None = None
    color: str | None = None
    vin: str | None = None
    description: str | None = None
    image_urls: tuple[str, ...] = ()
    reserved_by: str | None = None
    reserved_until: datetime | None = None
    sold_date: datetime | None = None
    sold_price: Decimal | None = None

    @property
    def is_sold(self) -> bool:
        return self.inventory_status is InventoryStatus.SOLD


@dataclass(frozen=True, slots=True)
class NewVehicle:
    """Attributes a dealer supplies when listing a vehicle."""

    make: str
    model: str
    year: int
    price: Decimal
    mileage: int
    fuel_type: FuelType
    transmission: Transmission
    body_type: BodyType
    drivetrain: Drivetrain
    condition: Condition = Condition.USED
    dealer_id: str | None = None
    features: tuple[str, ...] = ()
    engine: str | None = None
    horsepower: int | None = None
    color: str | None = None
    vin: str | None = None
    description: str | None = None
    image_urls: tuple[str, ...] = ()
    inventory_status: InventoryStatus = InventoryStatus.IN_STOCK
    stock_quantity: int = 1

    def validate(self, current_year: int) -> None:
        """
        Validate cross-field consistency of a new listing.

        Raises:
            ValidationError: With one entry per offending field
        """
        errors: list[FieldError] = []

        if not isinstance(self.price, Decimal):
            errors.append(field_error("price", "Must be Decimal", "INVALID_TYPE"))
        elif self.price < 0:
            errors.append(field_error("price", "Must be >= 0"))
        if self.mileage < 0:
            errors.append(field_error("mileage", "Must be >= 0"))
        # Next year's models are listed ahead of time; anything later is a typo
        if not MIN_MODEL_YEAR <= self.year <= current_year + 1:
            errors.append(
                field_error(
                    "year",
                    f"Must be between {MIN_MODEL_YEAR} and {current_year + 1}",
                    "INVALID_RANGE",
                )
            )
        if self.stock_quantity < 0:
            errors.append(field_error("stock_quantity", "Must be >= 0"))
        if self.inventory_status is InventoryStatus.SOLD:
            errors.append(field_error("inventory_status", "A new listing cannot start as sold"))

        ValidationError.raise_if_any(errors)


@dataclass(frozen=True, slots=True)
class VehiclePatch:
    """
    Partial update of a vehicle. None means "leave unchanged".

    Price and inventory status are ledger-tracked; every other field is
    copied over as-is.
    """

    price: Decimal | None = None
    inventory_status: InventoryStatus | None = None
    make: str | None = None
    model: str | None = None
    year: int | None = None
    mileage: int | None = None
    fuel_type: FuelType | None = None
    transmission: Transmission | None = None
    body_type: BodyType | None = None
    drivetrain: Drivetrain | None = None
    condition: Condition | None = None
    features: tuple[str, ...] | None = None
    engine: str | None = None
    horsepower: int | None = None
    color: str | None = None
    vin: str | None = None
    description: str | None = None
    image_urls: tuple[str, ...] | None = None
    stock_quantity: int | None = None
    reserved_by: str | None = None
    reserved_until: datetime | None = None

    def validate(self, current_year: int) -> None:
        """
        Raises:
            ValidationError: If a supplied value is out of range
        """
        if self.price is not None and not isinstance(self.price, Decimal):
            raise ValidationError("price must be Decimal or None (no floats past the boundary)")
        if self.price is not None and self.price < 0:
            raise ValidationError("price must be >= 0")
        if self.mileage is not None and self.mileage < 0:
            raise ValidationError("mileage must be >= 0")
        if self.stock_quantity is not None and self.stock_quantity < 0:
            raise ValidationError("stock_quantity must be >= 0")
        if self.year is not None and not MIN_MODEL_YEAR <= self.year <= current_year + 1:
            raise ValidationError(f"year must be between {MIN_MODEL_YEAR} and {current_year + 1}")

    def attribute_changes(self) -> dict[str, object]:
        """Supplied fields that are not tracked by the inventory ledger."""
        untracked = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("price", "inventory_status")
        }
        return {name: value for name, value in untracked.items() if value is not None}


# ==============================================================================
# Search
# ==============================================================================


@dataclass(frozen=True, slots=True)
class SearchFilters:
    make: str | None = None
    model: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    max_mileage: int | None = None
    fuel_type: FuelType | None = None
    transmission: Transmission | None = None
    body_type: BodyType | None = None
    condition: Condition | None = None
    dealer_id: str | None = None
    sort_by: SortBy = SortBy.CREATED_DESC

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )

        if (
            self.year_min is not None
            and self.year_max is not None
            and self.year_min > self.year_max
        ):
            raise FilterValidationError("year_min cannot be greater than year_max")
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")
        if self.max_mileage is not None and self.max_mileage < 0:
            raise FilterValidationError("max_mileage must be >= 0")


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_LIMIT:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_LIMIT}")
