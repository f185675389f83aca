from datetime import date
from decimal import Decimal
from typing import Sequence

from sqlalchemy import and_, exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.car_repo import CarFilter, CarRepo, LocationRepo
from app.domain.entities.car import Car, CarType, Location
from app.domain.entities.reservation import ReservationStatus
from app.infrastructure.db.tables import cars, locations, reservations


class CarRepoSQL(CarRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select(self, today: date | None):
        if today is None:
            return select(cars)
        occupied = exists().where(
            and_(
                reservations.c.car_id == cars.c.id,
                reservations.c.status == ReservationStatus.CONFIRMED.value,
                reservations.c.start_date <= today,
                reservations.c.end_date > today,
            )
        )
        # Derived from the reservations so the flag cannot go stale as days pass.
        return select(*[c for c in cars.c if c.name != "available"], (~occupied).label("available"))

    async def get_by_id(self, car_id: int, today: date | None = None) -> Car | None:
        stmt = self._select(today).where(cars.c.id == car_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_car(row) if row else None

    async def list(self, filters: CarFilter, today: date | None = None) -> Sequence[Car]:
        stmt = self._select(today)
        if filters.min_price is not None:
            stmt = stmt.where(cars.c.price_per_day >= filters.min_price)
        if filters.max_price is not None:
            stmt = stmt.where(cars.c.price_per_day <= filters.max_price)
        if filters.car_type:
            stmt = stmt.where(cars.c.type == filters.car_type)
        if filters.location_id is not None:
            stmt = stmt.where(cars.c.location_id == filters.location_id)
        if filters.available_from is not None and filters.available_to is not None:
            booked = exists().where(
                and_(
                    reservations.c.car_id == cars.c.id,
                    reservations.c.status == ReservationStatus.CONFIRMED.value,
                    reservations.c.start_date < filters.available_to,
                    reservations.c.end_date > filters.available_from,
                )
            )
            stmt = stmt.where(~booked)
        stmt = stmt.order_by(cars.c.price_per_day, cars.c.id)
        result = await self._session.execute(stmt)
        return [self._map_car(row) for row in result.mappings().all()]

    async def lock(self, car_id: int) -> bool:
        # A write on the car row holds the row lock (MySQL) or the database
        # write lock (SQLite) until the surrounding transaction ends.
        stmt = (
            update(cars)
            .where(cars.c.id == car_id)
            .values(lock_version=cars.c.lock_version + 1)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def set_available(self, car_id: int, available: bool) -> None:
        stmt = update(cars).where(cars.c.id == car_id).values(available=available)
        await self._session.execute(stmt)

    def _map_car(self, row) -> Car:
        return Car(
            id=row["id"],
            model=row["model"],
            type=CarType(row["type"]),
            price_per_day=Decimal(row["price_per_day"]),
            available=bool(row["available"]),
            location_id=row["location_id"],
            image_url=row["image_url"],
        )


class LocationRepoSQL(LocationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def search(self, query: str | None = None) -> Sequence[Location]:
        stmt = select(locations)
        if query:
            stmt = stmt.where(locations.c.name.ilike(f"%{_escape_like(query)}%", escape="\\"))
        stmt = stmt.order_by(locations.c.name)
        result = await self._session.execute(stmt)
        return [Location(id=row["id"], name=row["name"]) for row in result.mappings().all()]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
