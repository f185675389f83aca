"""Agregación de reportes de renta sobre una instantánea de reservaciones."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from app.domain.entities.reservation import ReservationStatus

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class RentalRow:
    """Reservación unida con los datos de su auto."""

    reservation_id: int
    start_date: date
    status: ReservationStatus
    total_price: Decimal
    car_type: str
    car_model: str


@dataclass
class DailyRentals:
    date: date
    total_rentals: int = 0
    total_revenue: Decimal = Decimal("0.00")
    average_price: Decimal = Decimal("0.00")
    cancellations: int = 0
    car_types: list[str] = field(default_factory=list)


@dataclass
class UserDailyRentals:
    date: date
    rentals: int = 0
    total_spent: Decimal = Decimal("0.00")
    cars_rented: list[str] = field(default_factory=list)


@dataclass
class UserRentalReport:
    days: list[UserDailyRentals]
    total_rentals: int
    total_spent: Decimal
    average_daily_spend: Decimal


def _in_window(row: RentalRow, start: date, end: date) -> bool:
    return start <= row.start_date <= end


def aggregate_daily_rentals(rows: Iterable[RentalRow], start: date, end: date) -> list[DailyRentals]:
    """
    Agrupa por día de inicio dentro de [start, end] (ambos incluidos).

    Conteo, ingresos, promedio y tipos de auto consideran solo reservaciones
    confirmadas; las canceladas se cuentan aparte.
    """
    days: dict[date, DailyRentals] = {}
    types: dict[date, set[str]] = {}

    for row in rows:
        if not _in_window(row, start, end) or row.status == ReservationStatus.PENDING:
            continue
        bucket = days.setdefault(row.start_date, DailyRentals(date=row.start_date))
        if row.status == ReservationStatus.CANCELLED:
            bucket.cancellations += 1
            continue
        bucket.total_rentals += 1
        bucket.total_revenue += row.total_price
        types.setdefault(row.start_date, set()).add(row.car_type)

    result = []
    for day in sorted(days):
        bucket = days[day]
        if bucket.total_rentals:
            bucket.average_price = (bucket.total_revenue / bucket.total_rentals).quantize(
                CENTS, rounding=ROUND_HALF_UP
            )
        bucket.total_revenue = bucket.total_revenue.quantize(CENTS)
        bucket.car_types = sorted(types.get(day, set()))
        result.append(bucket)
    return result


def aggregate_user_rentals(rows: Iterable[RentalRow], start: date, end: date) -> UserRentalReport:
    """Reporte por usuario: solo reservaciones confirmadas, agrupadas por día."""
    days: dict[date, UserDailyRentals] = {}

    for row in rows:
        if row.status != ReservationStatus.CONFIRMED or not _in_window(row, start, end):
            continue
        bucket = days.setdefault(row.start_date, UserDailyRentals(date=row.start_date))
        bucket.rentals += 1
        bucket.total_spent += row.total_price
        if row.car_model not in bucket.cars_rented:
            bucket.cars_rented.append(row.car_model)

    ordered = [days[day] for day in sorted(days)]
    total_rentals = sum(day.rentals for day in ordered)
    total_spent = sum((day.total_spent for day in ordered), Decimal("0.00"))
    average = (
        (total_spent / len(ordered)).quantize(CENTS, rounding=ROUND_HALF_UP)
        if ordered
        else Decimal("0.00")
    )
    return UserRentalReport(
        days=ordered,
        total_rentals=total_rentals,
        total_spent=total_spent.quantize(CENTS),
        average_daily_spend=average,
    )
