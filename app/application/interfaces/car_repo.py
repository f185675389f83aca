from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Sequence

from app.domain.entities.car import Car, Location


@dataclass
class CarFilter:
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    car_type: str | None = None
    location_id: int | None = None
    available_from: date | None = None
    available_to: date | None = None


class CarRepo:
    async def get_by_id(self, car_id: int, today: date | None = None) -> Car | None:
        """
        With `today`, `available` is derived from the confirmed reservations
        covering that day instead of the stored flag.
        """
        raise NotImplementedError

    async def list(self, filters: CarFilter, today: date | None = None) -> Sequence[Car]:
        """Cheapest first. A date window excludes cars with an overlapping confirmed reservation."""
        raise NotImplementedError

    async def lock(self, car_id: int) -> bool:
        """
        Take the write lock on the car row for the current transaction.

        Returns False when the car does not exist.
        """
        raise NotImplementedError

    async def set_available(self, car_id: int, available: bool) -> None:
        raise NotImplementedError


class LocationRepo:
    async def search(self, query: str | None = None) -> Sequence[Location]:
        raise NotImplementedError
