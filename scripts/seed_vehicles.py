#!/usr/bin/env python3
"""
Seed dealers and vehicles with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through the use cases, so every vehicle gets a calculated price,
  an initial price_history entry and an "added" inventory log entry

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so the script runs from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from motor_market.adapters.postgres_dealer_repository import PostgresDealerRepository
from motor_market.adapters.postgres_inventory_log_repository import (
    PostgresInventoryLogRepository,
)
from motor_market.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from motor_market.domain.clock import utc_now
from motor_market.domain.dealer import Dealer, NewDealer
from motor_market.domain.vehicle import (
    BodyType,
    Condition,
    Drivetrain,
    FuelType,
    NewVehicle,
    Transmission,
    Vehicle,
)
from motor_market.infra.db.models import (
    DealerAnalyticsRow,
    DealerRow,
    FavoriteRow,
    InventoryLogRow,
    PriceHistoryRow,
    ReviewRow,
    SaleRow,
    VehicleRow,
)
from motor_market.infra.db.session import get_session
from motor_market.use_cases.create_dealer import CreateDealer, CreateDealerRequest
from motor_market.use_cases.create_vehicle import CreateVehicle, CreateVehicleRequest


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_VEHICLES = 50


# ==============================================================================
# Market Data
# ==============================================================================

DEALERS = [
    ("Bay Motors", "San Francisco, CA"),
    ("Lone Star Autos", "Austin, TX"),
    ("Peach State Cars", "Atlanta, GA"),
    ("Windy City Motors", "Chicago, IL"),
    ("Sunshine Auto Group", "Miami, FL"),
]

# Make categories with list-price bands (USD, new)
MAKES = {
    "economy": {
        "makes": ["Nissan", "Chevrolet", "Kia", "Hyundai"],
        "base_price_min": Decimal("18000"),
        "base_price_max": Decimal("28000"),
    },
    "mid_range": {
        "makes": ["Toyota", "Honda", "Mazda", "Ford"],
        "base_price_min": Decimal("25000"),
        "base_price_max": Decimal("42000"),
    },
    "luxury": {
        "makes": ["BMW", "Mercedes-Benz", "Audi", "Lexus", "Tesla"],
        "base_price_min": Decimal("42000"),
        "base_price_max": Decimal("85000"),
    },
}

# (model, body type) by make
MODELS_BY_MAKE = {
    "Nissan": [("Sentra", BodyType.SEDAN), ("Rogue", BodyType.SUV), ("Frontier", BodyType.PICKUP)],
    "Chevrolet": [
        ("Malibu", BodyType.SEDAN),
        ("Equinox", BodyType.SUV),
        ("Silverado", BodyType.PICKUP),
    ],
    "Kia": [("Forte", BodyType.SEDAN), ("Sportage", BodyType.SUV), ("Soul", BodyType.HATCHBACK)],
    "Hyundai": [("Elantra", BodyType.SEDAN), ("Tucson", BodyType.SUV), ("Kona", BodyType.SUV)],
    "Toyota": [("Camry", BodyType.SEDAN), ("RAV4", BodyType.SUV), ("Tacoma", BodyType.PICKUP)],
    "Honda": [("Civic", BodyType.SEDAN), ("CR-V", BodyType.SUV), ("Odyssey", BodyType.VAN)],
    "Mazda": [
        ("Mazda3", BodyType.HATCHBACK),
        ("CX-5", BodyType.SUV),
        ("MX-5", BodyType.CONVERTIBLE),
    ],
    "Ford": [("Mustang", BodyType.COUPE), ("Explorer", BodyType.SUV), ("F-150", BodyType.PICKUP)],
    "BMW": [("3 Series", BodyType.SEDAN), ("X5", BodyType.SUV), ("4 Series", BodyType.COUPE)],
    "Mercedes-Benz": [
        ("C-Class", BodyType.SEDAN),
        ("GLC", BodyType.SUV),
        ("E-Class Wagon", BodyType.WAGON),
    ],
    "Audi": [("A4", BodyType.SEDAN), ("Q5", BodyType.SUV), ("A5 Cabriolet", BodyType.CONVERTIBLE)],
    "Lexus": [("ES", BodyType.SEDAN), ("RX", BodyType.SUV)],
    "Tesla": [("Model 3", BodyType.SEDAN), ("Model Y", BodyType.SUV)],
}

FEATURES = [
    "Navigation system",
    "Leather seats",
    "Sunroof",
    "Heated seats",
    "Premium audio",
    "Backup camera",
    "Adaptive cruise control",
    "Bluetooth",
    "Apple CarPlay",
    "Keyless entry",
]

COLORS = ["Black", "White", "Silver", "Gray", "Blue", "Red"]

CURRENT_YEAR = utc_now().year


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_vehicle(dealer: Dealer) -> NewVehicle:
    """Generate a single random listing for ``dealer``."""
    category = random.choice(list(MAKES.keys()))
    make = random.choice(MAKES[category]["makes"])
    model, body_type = random.choice(MODELS_BY_MAKE[make])

    # Favor newer model years
    year = random.choices(
        range(CURRENT_YEAR - 9, CURRENT_YEAR + 1),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7],
        k=1,
    )[0]
    years_old = CURRENT_YEAR - year

    base_min = int(MAKES[category]["base_price_min"])
    base_max = int(MAKES[category]["base_price_max"])
    price = Decimal(random.randint(base_min, base_max) // 100 * 100)

    # Mileage correlated with age
    mileage = random.randint(0, max(1000, years_old * 15000 + random.randint(0, 20000)))

    if make == "Tesla":
        fuel_type = FuelType.ELECTRIC
    else:
        fuel_type = random.choices(
            [FuelType.GASOLINE, FuelType.DIESEL, FuelType.HYBRID, FuelType.ELECTRIC],
            weights=[7, 1, 2, 0 if years_old > 4 else 1],
            k=1,
        )[0]

    if years_old == 0:
        condition = Condition.NEW
    else:
        condition = random.choices([Condition.USED, Condition.CERTIFIED], weights=[3, 1], k=1)[0]

    return NewVehicle(
        make=make,
        model=model,
        year=year,
        price=price,
        mileage=0 if condition is Condition.NEW else mileage,
        fuel_type=fuel_type,
        transmission=random.choices(
            [Transmission.AUTOMATIC, Transmission.MANUAL, Transmission.CVT],
            weights=[6, 1, 2],
            k=1,
        )[0],
        body_type=body_type,
        drivetrain=random.choice(list(Drivetrain)),
        condition=condition,
        dealer_id=dealer.id,
        features=tuple(random.sample(FEATURES, k=random.randint(0, 4))),
        color=random.choice(COLORS),
    )


def clear_tables(session: Session) -> None:
    """Delete every row, children before parents."""
    for model in (
        FavoriteRow,
        DealerAnalyticsRow,
        SaleRow,
        ReviewRow,
        InventoryLogRow,
        PriceHistoryRow,
        VehicleRow,
        DealerRow,
    ):
        deleted = session.execute(delete(model)).rowcount
        print(f"   Deleted {deleted} rows from {model.__tablename__}")


def seed(num_vehicles: int = NUM_VEHICLES, seed_value: int = RANDOM_SEED) -> None:
    """
    Seed the database with dealers and random vehicles.

    Args:
        num_vehicles: Number of vehicles to generate
        seed_value: Random seed for deterministic results
    """
    random.seed(seed_value)

    print(f"🌱 Seeding database with {num_vehicles} vehicles (seed={seed_value})...")

    with get_session() as session:
        print("🗑️  Clearing existing data...")
        clear_tables(session)

        create_dealer = CreateDealer(dealer_repository=PostgresDealerRepository(session))
        dealers = [
            create_dealer.execute(
                CreateDealerRequest(dealer=NewDealer(name=name, location=location, verified=True))
            )
            for name, location in DEALERS
        ]
        print(f"🏢 Created {len(dealers)} dealers")

        create_vehicle = CreateVehicle(
            vehicle_repository=PostgresVehicleRepository(session),
            dealer_repository=PostgresDealerRepository(session),
            inventory_log_repository=PostgresInventoryLogRepository(session),
        )
        vehicles: list[Vehicle] = [
            create_vehicle.execute(
                CreateVehicleRequest(vehicle=generate_vehicle(random.choice(dealers)))
            ).vehicle
            for _ in range(num_vehicles)
        ]

        print(f"✅ Successfully seeded {len(vehicles)} vehicles!")

        print("\n📊 Sample vehicles:")
        for i, vehicle in enumerate(vehicles[:5], 1):
            print(
                f"   {i}. {vehicle.year} {vehicle.make} {vehicle.model} - "
                f"list ${vehicle.price:,.2f}, estimated ${vehicle.calculated_price:,.0f}"
            )

        if len(vehicles) > 5:
            print(f"   ... and {len(vehicles) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
