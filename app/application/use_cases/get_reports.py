from datetime import date

from app.application.interfaces.report_query import ReportQuery
from app.domain.entities.user import User
from app.domain.errors import InvalidDateRangeError
from app.domain.reporting import (
    DailyRentals,
    UserRentalReport,
    aggregate_daily_rentals,
    aggregate_user_rentals,
)


def _check_window(start: date, end: date) -> None:
    if start > end:
        raise InvalidDateRangeError("startDate must be on or before endDate")


class GetDailyRentalsReportUseCase:
    def __init__(self, report_query: ReportQuery) -> None:
        self._report_query = report_query

    async def execute(self, start: date, end: date) -> list[DailyRentals]:
        _check_window(start, end)
        rows = await self._report_query.rental_rows(start, end)
        return aggregate_daily_rentals(rows, start, end)


class GetUserRentalReportUseCase:
    def __init__(self, report_query: ReportQuery) -> None:
        self._report_query = report_query

    async def execute(self, current_user: User, start: date, end: date) -> UserRentalReport:
        _check_window(start, end)
        rows = await self._report_query.rental_rows(start, end, user_id=current_user.id)
        return aggregate_user_rentals(rows, start, end)
