#!/usr/bin/env python3
"""
Seed the marketplace tables with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: prices correlated with year + make band
- Seeds one admin and a few customers, their test drives and wishlists,
  and the dealership with its weekly opening hours

Usage:
    python scripts/seed_cars.py
"""

from __future__ import annotations

import random
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autolot.domain.car import CarStatus
from autolot.domain.dealership import DayOfWeek
from autolot.domain.test_drive import TestDriveStatus
from autolot.domain.user import UserRole
from autolot.infra.db.models import (
    CarRow,
    DealershipInfoRow,
    SavedCarRow,
    TestDriveBookingRow,
    UserRow,
    WorkingHourRow,
)
from autolot.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_CARS = 50  # Number of cars to generate
NUM_BOOKINGS = 30
CURRENT_YEAR = 2026
TODAY = date(2026, 10, 17)


# ==============================================================================
# Inventory Data
# ==============================================================================

# Make categories with price bands (base prices in USD)
MAKES = {
    "economy": {
        "makes": ["Nissan", "Chevrolet", "Kia", "Hyundai"],
        "base_price_min": Decimal("15000"),
        "base_price_max": Decimal("25000"),
    },
    "mid_range": {
        "makes": ["Toyota", "Honda", "Mazda", "Volkswagen", "Ford"],
        "base_price_min": Decimal("25000"),
        "base_price_max": Decimal("45000"),
    },
    "premium": {
        "makes": ["BMW", "Mercedes-Benz", "Audi", "Volvo"],
        "base_price_min": Decimal("45000"),
        "base_price_max": Decimal("80000"),
    },
}

# Models with their body type
MODELS_BY_MAKE = {
    "Nissan": [("Versa", "Sedan"), ("Kicks", "SUV"), ("X-Trail", "SUV")],
    "Chevrolet": [("Onix", "Hatchback"), ("Tracker", "SUV"), ("Silverado", "Truck")],
    "Kia": [("Rio", "Sedan"), ("Sportage", "SUV"), ("Soul", "Hatchback")],
    "Hyundai": [("Elantra", "Sedan"), ("Tucson", "SUV"), ("Kona", "SUV")],
    "Toyota": [("Corolla", "Sedan"), ("Camry", "Sedan"), ("RAV4", "SUV"), ("Hilux", "Truck")],
    "Honda": [("Civic", "Sedan"), ("Accord", "Sedan"), ("CR-V", "SUV"), ("Fit", "Hatchback")],
    "Mazda": [("Mazda3", "Hatchback"), ("CX-5", "SUV"), ("MX-5", "Convertible")],
    "Volkswagen": [("Jetta", "Sedan"), ("Tiguan", "SUV"), ("Golf", "Hatchback")],
    "Ford": [("Escape", "SUV"), ("Mustang", "Coupe"), ("F-150", "Truck")],
    "BMW": [("3 Series", "Sedan"), ("X3", "SUV"), ("4 Series", "Coupe")],
    "Mercedes-Benz": [("C-Class", "Sedan"), ("GLC", "SUV"), ("E-Class", "Sedan")],
    "Audi": [("A4", "Sedan"), ("Q5", "SUV"), ("A5", "Coupe")],
    "Volvo": [("S60", "Sedan"), ("XC60", "SUV"), ("XC90", "SUV")],
}

TRANSMISSIONS = ["Manual", "Automatic", "CVT"]
FUEL_TYPES = ["Petrol", "Diesel", "Hybrid", "Electric"]
COLORS = ["White", "Black", "Silver", "Gray", "Blue", "Red"]
SEATS_BY_BODY_TYPE = {"Coupe": 4, "Convertible": 2, "Truck": 5, "SUV": 5}

CUSTOMERS = [
    ("user_2customer01", "ana.lopez@example.com", "Ana Lopez"),
    ("user_2customer02", "ben.carter@example.com", "Ben Carter"),
    ("user_2customer03", "chloe.kim@example.com", "Chloe Kim"),
    ("user_2customer04", "diego.ramos@example.com", "Diego Ramos"),
]
ADMIN = ("user_2admin0001", "admin@autolot.example", "Autolot Admin")

TIME_SLOTS = [("09:00", "10:00"), ("10:30", "11:30"), ("13:00", "14:00"), ("15:30", "16:30")]


# ==============================================================================
# Price Calculation with Realism
# ==============================================================================


def calculate_price(make: str, year: int) -> Decimal:
    """
    Calculate price based on make category and year.

    Logic:
    - Newer cars are more expensive
    - Premium brands cost more than economy
    - Price depreciates ~10% per year from base price
    """
    category = next(
        (cat_data for cat_data in MAKES.values() if make in cat_data["makes"]),
        MAKES["mid_range"],
    )

    base_price = Decimal(
        random.randint(int(category["base_price_min"]), int(category["base_price_max"]))
    )

    years_old = max(0, CURRENT_YEAR - year)

    # Depreciation: ~10% per year, capped at 70% total depreciation
    total_depreciation = min(Decimal("0.10") * years_old, Decimal("0.70"))
    depreciated_price = base_price * (Decimal("1") - total_depreciation)

    # Add some randomness (+/- 10%)
    variance = Decimal(str(random.uniform(0.90, 1.10)))
    final_price = depreciated_price * variance

    # Round to nearest 100
    final_price = (final_price / 100).quantize(Decimal("1")) * 100

    return max(final_price, Decimal("5000"))


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_car() -> CarRow:
    """Generate a single random car with realistic data."""
    category = random.choice(list(MAKES.keys()))
    make = random.choice(MAKES[category]["makes"])
    model, body_type = random.choice(MODELS_BY_MAKE[make])

    # Year: weighted toward newer
    year = random.choices(
        range(CURRENT_YEAR - 9, CURRENT_YEAR + 1),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7],
        k=1,
    )[0]

    years_old = CURRENT_YEAR - year
    max_mileage = min(200000, years_old * 20000 + random.randint(0, 30000))

    fuel_weights = [5, 1, 2, 1] if year >= CURRENT_YEAR - 3 else [7, 2, 1, 0]

    return CarRow(
        make=make,
        model=model,
        year=year,
        price=calculate_price(make, year),
        mileage=random.randint(0, max(1000, max_mileage)),
        color=random.choice(COLORS),
        fuel_type=random.choices(FUEL_TYPES, weights=fuel_weights, k=1)[0],
        transmission=random.choices(TRANSMISSIONS, weights=[1, 5, 2], k=1)[0],
        body_type=body_type,
        seats=SEATS_BY_BODY_TYPE.get(body_type, 5),
        description=f"{year} {make} {model} in great condition, inspected and ready to drive.",
        status=random.choices(list(CarStatus), weights=[8, 1, 2], k=1)[0],
        featured=random.random() < 0.15,
        images=[
            f"https://images.autolot.example/{make.lower().replace(' ', '-')}/"
            f"{model.lower().replace(' ', '-')}/{year}/{n}.jpg"
            for n in range(1, 4)
        ],
    )


def generate_users() -> list[UserRow]:
    users = [
        UserRow(external_auth_id=auth_id, email=email, name=name, role=UserRole.USER)
        for auth_id, email, name in CUSTOMERS
    ]
    auth_id, email, name = ADMIN
    users.append(UserRow(external_auth_id=auth_id, email=email, name=name, role=UserRole.ADMIN))
    return users


def generate_booking(cars: list[CarRow], customers: list[UserRow]) -> TestDriveBookingRow:
    car = random.choice(cars)
    start_time, end_time = random.choice(TIME_SLOTS)
    booking_date = TODAY + timedelta(days=random.randint(-30, 30))

    # Past bookings are settled, future ones are still open
    if booking_date < TODAY:
        status = random.choices(
            [TestDriveStatus.COMPLETED, TestDriveStatus.CANCELLED, TestDriveStatus.NO_SHOW],
            weights=[6, 2, 1],
            k=1,
        )[0]
    else:
        status = random.choice([TestDriveStatus.PENDING, TestDriveStatus.CONFIRMED])

    return TestDriveBookingRow(
        car_id=car.id,
        user_id=random.choice(customers).id,
        booking_date=booking_date,
        start_time=start_time,
        end_time=end_time,
        status=status,
    )


def generate_dealership() -> DealershipInfoRow:
    dealership = DealershipInfoRow(
        name="Autolot Motors",
        address="1200 Market Street, Springfield",
        phone="+1 555 0100",
        email="contact@autolot.example",
    )
    for day in DayOfWeek:
        is_open = day is not DayOfWeek.SUNDAY
        dealership.working_hours.append(
            WorkingHourRow(
                day_of_week=day,
                open_time="10:00" if day is DayOfWeek.SATURDAY else "09:00",
                close_time="16:00" if day is DayOfWeek.SATURDAY else "18:00",
                is_open=is_open,
            )
        )
    return dealership


def seed(num_cars: int = NUM_CARS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random marketplace data.

    Args:
        num_cars: Number of cars to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_cars} cars (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent), children first
        print("🗑️  Clearing existing data...")
        for row_type in (SavedCarRow, TestDriveBookingRow, WorkingHourRow, DealershipInfoRow, UserRow, CarRow):
            deleted_count = session.query(row_type).delete()
            print(f"   Deleted {deleted_count} rows from {row_type.__tablename__}")

        # Step 2: Inventory and users
        print(f"🚗 Generating {num_cars} cars...")
        cars = [generate_car() for _ in range(num_cars)]
        users = generate_users()
        session.add_all(cars)
        session.add_all(users)
        session.flush()  # Assign ids

        customers = [user for user in users if user.role is UserRole.USER]

        # Step 3: Test drives, wishlists and the dealership
        bookings = [generate_booking(cars, customers) for _ in range(NUM_BOOKINGS)]
        session.add_all(bookings)

        saved = {
            (customer.id, car.id)
            for customer in customers
            for car in random.sample(cars, k=3)
        }
        session.add_all(SavedCarRow(user_id=user_id, car_id=car_id) for user_id, car_id in saved)

        session.add(generate_dealership())
        session.flush()

        print(f"✅ Seeded {len(cars)} cars, {len(users)} users, {len(bookings)} test drives!")

        print("\n📊 Sample cars:")
        for i, car in enumerate(cars[:5], 1):
            print(
                f"   {i}. {car.year} {car.make} {car.model} - "
                f"${car.price:,.2f} ({car.transmission}, {car.fuel_type}, {car.status.value})"
            )

        if len(cars) > 5:
            print(f"   ... and {len(cars) - 5} more")

        print(f"\n🔑 Admin credential: Bearer {ADMIN[0]}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
