from datetime import date
from decimal import Decimal

from app.domain.entities.reservation import ReservationStatus
from app.domain.reporting import RentalRow, aggregate_daily_rentals, aggregate_user_rentals

CONFIRMED = ReservationStatus.CONFIRMED
CANCELLED = ReservationStatus.CANCELLED
PENDING = ReservationStatus.PENDING


def _row(reservation_id, day, status, price, car_type="Sedan", model="Toyota Camry"):
    return RentalRow(
        reservation_id=reservation_id,
        start_date=day,
        status=status,
        total_price=Decimal(price),
        car_type=car_type,
        car_model=model,
    )


ROWS = [
    _row(1, date(2024, 3, 1), CONFIRMED, "100.00", "SUV", "Honda CR-V"),
    _row(2, date(2024, 3, 1), CONFIRMED, "50.00", "Economy", "Toyota Corolla"),
    _row(3, date(2024, 3, 1), CANCELLED, "70.00", "Luxury", "Audi A6"),
    _row(4, date(2024, 3, 2), CANCELLED, "80.00"),
    _row(5, date(2024, 3, 3), PENDING, "90.00"),
    _row(6, date(2024, 3, 9), CONFIRMED, "90.00"),
]


class TestDailyRentals:
    def test_groups_confirmed_by_start_day(self):
        report = aggregate_daily_rentals(ROWS, date(2024, 3, 1), date(2024, 3, 5))

        assert [day.date for day in report] == [date(2024, 3, 1), date(2024, 3, 2)]
        first = report[0]
        assert first.total_rentals == 2
        assert first.total_revenue == Decimal("150.00")
        assert first.average_price == Decimal("75.00")
        assert first.cancellations == 1
        assert first.car_types == ["Economy", "SUV"]

    def test_day_with_only_cancellations_reports_zeros(self):
        report = aggregate_daily_rentals(ROWS, date(2024, 3, 2), date(2024, 3, 2))

        assert len(report) == 1
        day = report[0]
        assert day.total_rentals == 0
        assert day.total_revenue == Decimal("0.00")
        assert day.average_price == Decimal("0.00")
        assert day.cancellations == 1
        assert day.car_types == []

    def test_window_is_inclusive_and_pending_is_skipped(self):
        report = aggregate_daily_rentals(ROWS, date(2024, 3, 3), date(2024, 3, 9))
        assert [day.date for day in report] == [date(2024, 3, 9)]

    def test_empty_window(self):
        assert aggregate_daily_rentals(ROWS, date(2025, 1, 1), date(2025, 1, 31)) == []


class TestUserRentals:
    def test_confirmed_only_with_totals(self):
        report = aggregate_user_rentals(ROWS, date(2024, 3, 1), date(2024, 3, 31))

        assert [day.date for day in report.days] == [date(2024, 3, 1), date(2024, 3, 9)]
        assert report.days[0].rentals == 2
        assert report.days[0].cars_rented == ["Honda CR-V", "Toyota Corolla"]
        assert report.total_rentals == 3
        assert report.total_spent == Decimal("240.00")
        assert report.average_daily_spend == Decimal("120.00")

    def test_no_rentals(self):
        report = aggregate_user_rentals([], date(2024, 3, 1), date(2024, 3, 31))
        assert report.days == []
        assert report.total_rentals == 0
        assert report.average_daily_spend == Decimal("0.00")
