from datetime import date, datetime
from decimal import Decimal

from pydantic import Field, model_validator

from app.api.schemas.common import CamelModel, CamelRequest, Money
from app.domain.entities.reservation import ReservationStatus


class CreateReservationRequest(CamelRequest):
    car_id: int
    user_id: int | None = None
    start_date: date
    end_date: date
    # Advisory only: the server always recomputes the price.
    total_price: Decimal | None = Field(default=None, ge=0)
    gps: bool = False
    toll_pass: bool = False


class UpdateReservationRequest(CamelRequest):
    start_date: date | None = None
    end_date: date | None = None
    total_price: Decimal | None = Field(default=None, ge=0)
    gps: bool | None = None
    toll_pass: bool | None = None

    @model_validator(mode="after")
    def validate_not_empty(self) -> "UpdateReservationRequest":
        if all(
            value is None
            for value in (self.start_date, self.end_date, self.gps, self.toll_pass)
        ):
            raise ValueError("At least one of startDate, endDate, gps, tollPass is required")
        return self


class ReservationResponse(CamelModel):
    id: int
    car_id: int
    user_id: int
    start_date: date
    end_date: date
    total_price: Money
    status: ReservationStatus
    gps: bool
    toll_pass: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CancelReservationResponse(CamelModel):
    success: bool = True
    reservation: ReservationResponse
