from typing import Sequence

from app.application.interfaces.car_repo import CarFilter, CarRepo, LocationRepo
from app.application.interfaces.clock import Clock
from app.domain.entities.car import Car, Location
from app.domain.errors import CarNotFoundError, ValidationError
from app.domain.value_objects.date_range import DateRange

ALL_TYPES = "All Types"


class ListCarsUseCase:
    def __init__(self, car_repo: CarRepo, clock: Clock) -> None:
        self._car_repo = car_repo
        self._clock = clock

    async def execute(self, filters: CarFilter) -> Sequence[Car]:
        if filters.car_type == ALL_TYPES:
            filters.car_type = None
        if (filters.available_from is None) != (filters.available_to is None):
            raise ValidationError("availableFrom", "availableFrom and availableTo go together")
        if filters.available_from is not None:
            # Validates ordering of the window.
            DateRange(start=filters.available_from, end=filters.available_to)
        if (
            filters.min_price is not None
            and filters.max_price is not None
            and filters.min_price > filters.max_price
        ):
            raise ValidationError("minPrice", "minPrice cannot exceed maxPrice")
        return await self._car_repo.list(filters, today=self._clock.today())


class GetCarUseCase:
    def __init__(self, car_repo: CarRepo, clock: Clock) -> None:
        self._car_repo = car_repo
        self._clock = clock

    async def execute(self, car_id: int) -> Car:
        car = await self._car_repo.get_by_id(car_id, today=self._clock.today())
        if not car:
            raise CarNotFoundError(car_id)
        return car


class SearchLocationsUseCase:
    def __init__(self, location_repo: LocationRepo) -> None:
        self._location_repo = location_repo

    async def execute(self, query: str | None = None) -> Sequence[Location]:
        query = (query or "").strip()
        return await self._location_repo.search(query or None)
