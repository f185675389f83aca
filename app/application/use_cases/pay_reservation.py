import logging
from typing import Sequence

from app.api.schemas.payments import CreatePaymentRequest
from app.application.interfaces.car_repo import CarRepo
from app.application.interfaces.clock import Clock
from app.application.interfaces.payment_repo import PaymentFilter, PaymentRepo
from app.application.interfaces.reservation_repo import ReservationRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.domain.entities.payment import Payment
from app.domain.entities.user import User
from app.domain.errors import (
    DuplicatePaymentError,
    InvalidReservationStatusError,
    ReservationNotFoundError,
)
from app.domain.value_objects.card import CardDetails


class PayReservationUseCase:
    """
    Payment stub: validates card shape and records a captured payment.

    No charge is made anywhere. At most one payment exists per reservation.
    """

    def __init__(
        self,
        reservation_repo: ReservationRepo,
        car_repo: CarRepo,
        payment_repo: PaymentRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._car_repo = car_repo
        self._payment_repo = payment_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CreatePaymentRequest, current_user: User) -> Payment:
        card = CardDetails(
            number=request.card_number,
            holder_name=request.card_name,
            expiry=request.expiry,
            cvc=request.cvc,
        )

        async with self._transaction_manager.start():
            reservation = await self._reservation_repo.get_by_id(request.reservation_id)
            if not reservation or not current_user.can_access(reservation.user_id):
                raise ReservationNotFoundError(request.reservation_id)

            # The amount must match the stored price: no update or cancel may
            # commit for this car until the payment is written.
            await self._car_repo.lock(reservation.car_id)
            reservation = await self._reservation_repo.get_by_id(reservation.id)
            if reservation.is_cancelled:
                raise InvalidReservationStatusError(
                    current_status=reservation.status.value,
                    expected_status=["pending", "confirmed"],
                    operation="pay reservation",
                )

            if await self._payment_repo.get_by_reservation(reservation.id):
                raise DuplicatePaymentError(reservation.id)

            payment = Payment.captured(
                reservation_id=reservation.id,
                user_id=reservation.user_id,
                amount=reservation.total_price,
                method=request.method,
                card_last4=card.last4,
            )
            payment.created_at = self._clock.now()
            payment = await self._payment_repo.create(payment)

        self._logger.info(
            "Payment captured",
            extra={
                "payment_id": payment.id,
                "reservation_id": payment.reservation_id,
                "card_last4": payment.card_last4,
                "amount": str(payment.amount),
            },
        )
        return payment


class ListPaymentsUseCase:
    def __init__(self, payment_repo: PaymentRepo) -> None:
        self._payment_repo = payment_repo

    async def execute(
        self,
        current_user: User,
        user_id: int | None = None,
        reservation_id: int | None = None,
    ) -> Sequence[Payment]:
        if not current_user.is_admin:
            user_id = current_user.id
        return await self._payment_repo.list(
            PaymentFilter(user_id=user_id, reservation_id=reservation_id)
        )
