"""Reference data: locations, the car catalog and demo accounts."""

import logging
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncConnection

from app.application.interfaces.credentials import PasswordHasher
from app.domain.entities.car import CarType
from app.domain.entities.user import UserRole
from app.infrastructure.db.tables import cars, locations, users

logger = logging.getLogger(__name__)

LOCATIONS = [
    "San Francisco, CA",
    "San Jose, CA",
    "Los Angeles, CA",
    "New York, NY",
    "Austin, TX",
    "Dallas, TX",
    "Seattle, WA",
    "Portland, OR",
    "Toronto, ON",
    "Waterloo, ON",
    "Brampton, ON",
    "Greater Toronto Area (GTA), ON",
]

CARS: list[tuple[str, CarType, str]] = [
    ("Toyota Corolla", CarType.ECONOMY, "45.00"),
    ("Honda Civic", CarType.ECONOMY, "48.00"),
    ("Hyundai Elantra", CarType.ECONOMY, "47.00"),
    ("Nissan Versa", CarType.ECONOMY, "42.00"),
    ("Toyota Camry", CarType.SEDAN, "65.00"),
    ("Honda Accord", CarType.SEDAN, "68.00"),
    ("Mazda 6", CarType.SEDAN, "70.00"),
    ("Volkswagen Passat", CarType.SEDAN, "72.00"),
    ("Volkswagen Golf", CarType.COMPACT, "55.00"),
    ("Mini Cooper", CarType.COMPACT, "60.00"),
    ("Ford Focus", CarType.COMPACT, "52.00"),
    ("Mazda 3", CarType.COMPACT, "54.00"),
    ("Honda CR-V", CarType.SUV, "85.00"),
    ("Toyota RAV4", CarType.SUV, "88.00"),
    ("Mazda CX-5", CarType.SUV, "90.00"),
    ("Chevrolet Suburban", CarType.SUV, "120.00"),
    ("BMW 5 Series", CarType.LUXURY, "180.00"),
    ("Mercedes E-Class", CarType.LUXURY, "185.00"),
    ("Audi A6", CarType.LUXURY, "175.00"),
    ("Tesla Model 3", CarType.LUXURY, "150.00"),
    ("BMW X5", CarType.LUXURY_SUV, "200.00"),
    ("Mercedes GLE", CarType.LUXURY_SUV, "210.00"),
    ("Porsche Cayenne", CarType.LUXURY_SUV, "250.00"),
    ("Range Rover Sport", CarType.LUXURY_SUV, "245.00"),
    ("Ford F-150", CarType.TRUCK, "100.00"),
    ("Toyota Tundra", CarType.TRUCK, "105.00"),
    ("Chevrolet Silverado", CarType.TRUCK, "98.00"),
    ("RAM 1500", CarType.TRUCK, "95.00"),
    ("Porsche 911", CarType.SPORTS, "300.00"),
    ("Chevrolet Corvette", CarType.SPORTS, "275.00"),
    ("Ford Mustang GT", CarType.SPORTS, "150.00"),
    ("BMW M4", CarType.SPORTS, "225.00"),
]

USERS: list[tuple[str, str, UserRole]] = [
    ("aarav", "shah", UserRole.CUSTOMER),
    ("demo", "password", UserRole.CUSTOMER),
    ("admin", "admin", UserRole.ADMIN),
]


async def _is_empty(conn: AsyncConnection, table) -> bool:
    result = await conn.execute(select(func.count()).select_from(table))
    return result.scalar_one() == 0


async def seed_reference_data(conn: AsyncConnection, password_hasher: PasswordHasher) -> None:
    """
    Insert the catalog and demo accounts into empty tables.

    Each table is only seeded when it has no rows, so running this on every
    startup never duplicates or overwrites data.
    """
    if await _is_empty(conn, locations):
        await conn.execute(
            insert(locations),
            [{"id": index, "name": name} for index, name in enumerate(LOCATIONS, start=1)],
        )
        logger.info("Seeded locations", extra={"count": len(LOCATIONS)})

    if await _is_empty(conn, cars):
        await conn.execute(
            insert(cars),
            [
                {
                    "id": index,
                    "model": model,
                    "type": car_type.value,
                    "price_per_day": Decimal(price),
                    "available": True,
                    # Spread the fleet round-robin across the locations.
                    "location_id": (index - 1) % len(LOCATIONS) + 1,
                    "image_url": None,
                    "lock_version": 0,
                }
                for index, (model, car_type, price) in enumerate(CARS, start=1)
            ],
        )
        logger.info("Seeded cars", extra={"count": len(CARS)})

    if await _is_empty(conn, users):
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        rows = []
        for username, password, role in USERS:
            digest, salt = password_hasher.hash(password)
            rows.append(
                {
                    "username": username,
                    "password_hash": digest,
                    "password_salt": salt,
                    "role": role.value,
                    "created_at": now,
                }
            )
        await conn.execute(insert(users), rows)
        logger.info("Seeded users", extra={"count": len(rows)})
