from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_current_user, get_use_cases
from app.api.schemas.reservations import (
    CancelReservationResponse,
    CreateReservationRequest,
    ReservationResponse,
    UpdateReservationRequest,
)
from app.config import Settings, get_settings
from app.domain.entities.reservation import ReservationStatus
from app.domain.entities.user import User
from app.infrastructure.db.retry import retry_on_deadlock

router = APIRouter()


@router.get("/reservations", response_model=list[ReservationResponse])
async def list_reservations(
    user_id: int | None = Query(default=None, alias="userId"),
    reservation_status: ReservationStatus | None = Query(default=None, alias="status"),
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
) -> list[ReservationResponse]:
    reservations = await use_cases["list_reservations"].execute(
        current_user=current_user,
        user_id=user_id,
        status=reservation_status,
    )
    return [ReservationResponse.model_validate(r) for r in reservations]


@router.get("/reservations/{reservation_id}", response_model=ReservationResponse)
async def get_reservation(
    reservation_id: int,
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
) -> ReservationResponse:
    reservation = await use_cases["get_reservation"].execute(reservation_id, current_user)
    return ReservationResponse.model_validate(reservation)


@router.post(
    "/reservations",
    response_model=ReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reservation(
    payload: CreateReservationRequest,
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
    settings: Settings = Depends(get_settings),
) -> ReservationResponse:
    reservation = await retry_on_deadlock(
        lambda: use_cases["create_reservation"].execute(payload, current_user),
        max_attempts=settings.deadlock_retry_attempts,
        base_delay=settings.deadlock_retry_base_delay,
    )
    return ReservationResponse.model_validate(reservation)


@router.put("/reservations/{reservation_id}", response_model=ReservationResponse)
async def update_reservation(
    reservation_id: int,
    payload: UpdateReservationRequest,
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
    settings: Settings = Depends(get_settings),
) -> ReservationResponse:
    reservation = await retry_on_deadlock(
        lambda: use_cases["update_reservation"].execute(reservation_id, payload, current_user),
        max_attempts=settings.deadlock_retry_attempts,
        base_delay=settings.deadlock_retry_base_delay,
    )
    return ReservationResponse.model_validate(reservation)


@router.delete("/reservations/{reservation_id}", response_model=CancelReservationResponse)
async def cancel_reservation(
    reservation_id: int,
    current_user: User = Depends(get_current_user),
    use_cases=Depends(get_use_cases),
    settings: Settings = Depends(get_settings),
) -> CancelReservationResponse:
    reservation = await retry_on_deadlock(
        lambda: use_cases["cancel_reservation"].execute(reservation_id, current_user),
        max_attempts=settings.deadlock_retry_attempts,
        base_delay=settings.deadlock_retry_base_delay,
    )
    return CancelReservationResponse(
        success=True,
        reservation=ReservationResponse.model_validate(reservation),
    )
