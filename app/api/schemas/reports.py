import datetime as dt

from pydantic import BaseModel, ConfigDict

from app.api.schemas.common import Money


class DailyRentalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    total_rentals: int
    total_revenue: Money
    average_price: Money
    cancellations: int
    car_types: list[str]


class UserDailyRentalsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    rentals: int
    total_spent: Money
    cars_rented: list[str]


class UserRentalReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    days: list[UserDailyRentalsResponse]
    total_rentals: int
    total_spent: Money
    average_daily_spend: Money
