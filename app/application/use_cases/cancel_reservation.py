import logging

from app.application.interfaces.car_repo import CarRepo
from app.application.interfaces.clock import Clock
from app.application.interfaces.reservation_repo import ReservationRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.use_cases.refresh_car_availability import RefreshCarAvailability
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import User
from app.domain.errors import ReservationNotFoundError


class CancelReservationUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        car_repo: CarRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._car_repo = car_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._refresh_availability = RefreshCarAvailability(car_repo, reservation_repo, clock)
        self._logger = logging.getLogger(__name__)

    async def execute(self, reservation_id: int, current_user: User) -> Reservation:
        async with self._transaction_manager.start():
            reservation = await self._reservation_repo.get_by_id(reservation_id)
            if not reservation or not current_user.can_access(reservation.user_id):
                raise ReservationNotFoundError(reservation_id)
            if reservation.is_cancelled:
                return reservation

            await self._car_repo.lock(reservation.car_id)
            # Dates and price may have changed before the lock was taken.
            reservation = await self._reservation_repo.get_by_id(reservation_id)
            if not reservation.cancel():
                return reservation

            reservation.updated_at = self._clock.now()
            reservation = await self._reservation_repo.update(
                reservation, expected_status=ReservationStatus.CONFIRMED
            )
            await self._refresh_availability(reservation.car_id)

        self._logger.info(
            "Reservation cancelled",
            extra={"reservation_id": reservation.id, "car_id": reservation.car_id},
        )
        return reservation
