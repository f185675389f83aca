from datetime import datetime

from pydantic import Field

from app.api.schemas.common import CamelModel, CamelRequest, Money
from app.domain.entities.payment import PaymentStatus


class CreatePaymentRequest(CamelRequest):
    reservation_id: int
    card_number: str = Field(min_length=1)
    card_name: str = Field(min_length=1)
    expiry: str = Field(min_length=1)
    cvc: str = Field(min_length=1)
    method: str = Field(min_length=1, max_length=32)

    def __repr__(self) -> str:
        return f"CreatePaymentRequest(reservation_id={self.reservation_id!r}, method={self.method!r})"


class PaymentResponse(CamelModel):
    id: int
    reservation_id: int
    user_id: int
    amount: Money
    method: str
    card_last4: str | None = None
    status: PaymentStatus
    created_at: datetime | None = None
