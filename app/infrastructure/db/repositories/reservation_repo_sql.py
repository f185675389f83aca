from decimal import Decimal
from typing import Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.reservation_repo import ReservationFilter, ReservationRepo
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.errors import InvalidReservationStatusError, ReservationNotFoundError
from app.domain.value_objects.date_range import DateRange
from app.infrastructure.db.tables import reservations


class ReservationRepoSQL(ReservationRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, reservation_id: int) -> Reservation | None:
        stmt = select(reservations).where(reservations.c.id == reservation_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_reservation(row) if row else None

    async def list(self, filters: ReservationFilter) -> Sequence[Reservation]:
        stmt = select(reservations)
        if filters.user_id is not None:
            stmt = stmt.where(reservations.c.user_id == filters.user_id)
        if filters.status is not None:
            stmt = stmt.where(reservations.c.status == filters.status.value)
        stmt = stmt.order_by(reservations.c.created_at.desc(), reservations.c.id.desc())
        result = await self._session.execute(stmt)
        return [self._map_reservation(row) for row in result.mappings().all()]

    async def list_overlapping(
        self,
        car_id: int,
        date_range: DateRange,
        exclude_id: int | None = None,
    ) -> Sequence[Reservation]:
        stmt = select(reservations).where(
            reservations.c.car_id == car_id,
            reservations.c.status == ReservationStatus.CONFIRMED.value,
            reservations.c.start_date < date_range.end,
            reservations.c.end_date > date_range.start,
        )
        if exclude_id is not None:
            stmt = stmt.where(reservations.c.id != exclude_id)
        stmt = stmt.order_by(reservations.c.start_date, reservations.c.id)
        result = await self._session.execute(stmt)
        return [self._map_reservation(row) for row in result.mappings().all()]

    async def create(self, reservation: Reservation) -> Reservation:
        stmt = insert(reservations).values(self._to_row(reservation))
        result = await self._session.execute(stmt)
        reservation.id = result.inserted_primary_key[0]
        return reservation

    async def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
    ) -> Reservation:
        stmt = (
            update(reservations)
            .where(reservations.c.id == reservation.id)
            .values(self._to_row(reservation))
        )
        if expected_status is not None:
            stmt = stmt.where(reservations.c.status == expected_status.value)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            stored = await self.get_by_id(reservation.id)
            if stored is None or expected_status is None:
                raise ReservationNotFoundError(reservation.id)
            # Another transaction changed the status since it was read.
            raise InvalidReservationStatusError(
                current_status=stored.status.value,
                expected_status=expected_status.value,
                operation="update reservation",
            )
        return reservation

    def _to_row(self, reservation: Reservation) -> dict:
        return {
            "car_id": reservation.car_id,
            "user_id": reservation.user_id,
            "start_date": reservation.start_date,
            "end_date": reservation.end_date,
            "total_price": reservation.total_price,
            "status": reservation.status.value,
            "gps": reservation.gps,
            "toll_pass": reservation.toll_pass,
            "created_at": reservation.created_at,
            "updated_at": reservation.updated_at,
        }

    def _map_reservation(self, row) -> Reservation:
        return Reservation(
            id=row["id"],
            car_id=row["car_id"],
            user_id=row["user_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            total_price=Decimal(row["total_price"]),
            gps=bool(row["gps"]),
            toll_pass=bool(row["toll_pass"]),
            status=ReservationStatus(row["status"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
