from datetime import date

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_current_user, get_use_cases
from app.api.schemas.reports import DailyRentalsResponse, UserRentalReportResponse
from app.domain.entities.user import User

router = APIRouter()


@router.get("/reports/daily-rentals", response_model=list[DailyRentalsResponse])
async def daily_rentals(
    start_date: date = Query(alias="startDate"),
    end_date: date = Query(alias="endDate"),
    use_cases=Depends(get_use_cases),
) -> list[DailyRentalsResponse]:
    days = await use_cases["daily_rentals_report"].execute(start_date, end_date)
    return [DailyRentalsResponse.model_validate(day) for day in days]


@router.get("/reports/user-rentals", response_model=UserRentalReportResponse)
async def user_rentals(
    start_date: date = Query(alias="startDate"),
    end_date: date = Query(alias="endDate"),
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
) -> UserRentalReportResponse:
    report = await use_cases["user_rentals_report"].execute(current_user, start_date, end_date)
    return UserRentalReportResponse.model_validate(report)
