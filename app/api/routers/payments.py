from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_current_user, get_use_cases
from app.api.schemas.payments import CreatePaymentRequest, PaymentResponse
from app.config import Settings, get_settings
from app.domain.entities.user import User
from app.infrastructure.db.retry import retry_on_deadlock

router = APIRouter()


@router.post("/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payload: CreatePaymentRequest,
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
    settings: Settings = Depends(get_settings),
) -> PaymentResponse:
    payment = await retry_on_deadlock(
        lambda: use_cases["pay_reservation"].execute(payload, current_user),
        max_attempts=settings.deadlock_retry_attempts,
        base_delay=settings.deadlock_retry_base_delay,
    )
    return PaymentResponse.model_validate(payment)


@router.get("/payments", response_model=list[PaymentResponse])
async def list_payments(
    user_id: int | None = Query(default=None, alias="userId"),
    reservation_id: int | None = Query(default=None, alias="reservationId"),
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
) -> list[PaymentResponse]:
    payments = await use_cases["list_payments"].execute(
        current_user=current_user,
        user_id=user_id,
        reservation_id=reservation_id,
    )
    return [PaymentResponse.model_validate(p) for p in payments]
