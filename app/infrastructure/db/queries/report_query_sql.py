from datetime import date
from decimal import Decimal
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.report_query import ReportQuery
from app.domain.entities.reservation import ReservationStatus
from app.domain.reporting import RentalRow
from app.infrastructure.db.tables import cars, reservations


class ReportQuerySQL(ReportQuery):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def rental_rows(
        self,
        start: date,
        end: date,
        user_id: int | None = None,
    ) -> Sequence[RentalRow]:
        stmt = (
            select(
                reservations.c.id,
                reservations.c.start_date,
                reservations.c.status,
                reservations.c.total_price,
                cars.c.type,
                cars.c.model,
            )
            .select_from(reservations.join(cars, reservations.c.car_id == cars.c.id))
            .where(
                reservations.c.start_date >= start,
                reservations.c.start_date <= end,
            )
            .order_by(reservations.c.start_date, reservations.c.id)
        )
        if user_id is not None:
            stmt = stmt.where(reservations.c.user_id == user_id)

        result = await self._session.execute(stmt)
        return [
            RentalRow(
                reservation_id=row["id"],
                start_date=row["start_date"],
                status=ReservationStatus(row["status"]),
                total_price=Decimal(row["total_price"]),
                car_type=row["type"],
                car_model=row["model"],
            )
            for row in result.mappings().all()
        ]
