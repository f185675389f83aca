import logging
from dataclasses import replace

from app.api.schemas.reservations import UpdateReservationRequest
from app.application.interfaces.car_repo import CarRepo
from app.application.interfaces.clock import Clock
from app.application.interfaces.reservation_repo import ReservationRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.use_cases.refresh_car_availability import RefreshCarAvailability
from app.domain.availability import find_conflict
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import User
from app.domain.errors import CarNotFoundError, ReservationConflictError, ReservationNotFoundError
from app.domain.pricing import price_for_dates
from app.domain.value_objects.date_range import DateRange


class UpdateReservationUseCase:
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

    async def _load_locked(self, reservation_id: int, current_user: User) -> Reservation:
        reservation = await self._reservation_repo.get_by_id(reservation_id)
        if not reservation or not current_user.can_access(reservation.user_id):
            raise ReservationNotFoundError(reservation_id)

        if not await self._car_repo.lock(reservation.car_id):
            raise CarNotFoundError(reservation.car_id)
        # Re-read under the car lock: a cancel or update may have committed
        # between the first read and the lock.
        reservation = await self._reservation_repo.get_by_id(reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    async def execute(
        self,
        reservation_id: int,
        request: UpdateReservationRequest,
        current_user: User,
    ) -> Reservation:
        async with self._transaction_manager.start():
            current = await self._load_locked(reservation_id, current_user)
            current.ensure_modifiable()

            changes = {
                "start_date": request.start_date,
                "end_date": request.end_date,
                "gps": request.gps,
                "toll_pass": request.toll_pass,
            }
            changes = {
                field: value
                for field, value in changes.items()
                if value is not None and getattr(current, field) != value
            }
            if not changes:
                return current

            updated = replace(current, **changes)
            date_range = DateRange(start=updated.start_date, end=updated.end_date)
            car = await self._car_repo.get_by_id(current.car_id)

            overlapping = await self._reservation_repo.list_overlapping(
                current.car_id, date_range, exclude_id=current.id
            )
            conflict = find_conflict(date_range, overlapping, exclude_id=current.id)
            if conflict:
                self._logger.info(
                    "Reservation update rejected: overlapping booking",
                    extra={"reservation_id": current.id, "conflicting_reservation_id": conflict.id},
                )
                raise ReservationConflictError(current.car_id, conflict.id)

            updated.total_price = price_for_dates(
                date_range.start,
                date_range.end,
                car.price_per_day,
                updated.gps,
                updated.toll_pass,
            )
            updated.updated_at = self._clock.now()
            updated = await self._reservation_repo.update(
                updated, expected_status=ReservationStatus.CONFIRMED
            )
            await self._refresh_availability(current.car_id)

        self._logger.info(
            "Reservation updated",
            extra={
                "reservation_id": updated.id,
                "fields": sorted(changes),
                "total_price": str(updated.total_price),
            },
        )
        return updated
