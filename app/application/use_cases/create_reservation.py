import logging

from app.api.schemas.reservations import CreateReservationRequest
from app.application.interfaces.car_repo import CarRepo
from app.application.interfaces.clock import Clock
from app.application.interfaces.reservation_repo import ReservationRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.user_repo import UserRepo
from app.application.use_cases.refresh_car_availability import RefreshCarAvailability
from app.domain.availability import find_conflict
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import User
from app.domain.errors import (
    CarNotFoundError,
    ForbiddenError,
    ReservationConflictError,
    UserNotFoundError,
)
from app.domain.pricing import price_for_dates
from app.domain.value_objects.date_range import DateRange


class CreateReservationUseCase:
    def __init__(
        self,
        reservation_repo: ReservationRepo,
        car_repo: CarRepo,
        user_repo: UserRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._car_repo = car_repo
        self._user_repo = user_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._refresh_availability = RefreshCarAvailability(car_repo, reservation_repo, clock)
        self._logger = logging.getLogger(__name__)

    async def _resolve_owner(self, request: CreateReservationRequest, current_user: User) -> int:
        if request.user_id is None or request.user_id == current_user.id:
            return current_user.id
        if not current_user.is_admin:
            raise ForbiddenError("Cannot create reservations on behalf of another user")
        if not await self._user_repo.get_by_id(request.user_id):
            raise UserNotFoundError(request.user_id)
        return request.user_id

    async def execute(self, request: CreateReservationRequest, current_user: User) -> Reservation:
        date_range = DateRange(start=request.start_date, end=request.end_date)

        async with self._transaction_manager.start():
            user_id = await self._resolve_owner(request, current_user)

            # Serializes concurrent bookings of the same car until commit.
            if not await self._car_repo.lock(request.car_id):
                raise CarNotFoundError(request.car_id)
            car = await self._car_repo.get_by_id(request.car_id)

            overlapping = await self._reservation_repo.list_overlapping(request.car_id, date_range)
            conflict = find_conflict(date_range, overlapping)
            if conflict:
                self._logger.info(
                    "Reservation rejected: overlapping booking",
                    extra={"car_id": request.car_id, "conflicting_reservation_id": conflict.id},
                )
                raise ReservationConflictError(request.car_id, conflict.id)

            total_price = price_for_dates(
                date_range.start,
                date_range.end,
                car.price_per_day,
                request.gps,
                request.toll_pass,
            )
            if request.total_price is not None and request.total_price != total_price:
                self._logger.warning(
                    "Client price ignored in favour of server price",
                    extra={
                        "car_id": request.car_id,
                        "client_price": str(request.total_price),
                        "server_price": str(total_price),
                    },
                )

            now = self._clock.now()
            reservation = Reservation(
                car_id=request.car_id,
                user_id=user_id,
                start_date=date_range.start,
                end_date=date_range.end,
                total_price=total_price,
                gps=request.gps,
                toll_pass=request.toll_pass,
                status=ReservationStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            # Bookings are confirmed on creation; no approval step exists yet.
            reservation.confirm()
            reservation = await self._reservation_repo.create(reservation)
            await self._refresh_availability(request.car_id)

        self._logger.info(
            "Reservation created",
            extra={
                "reservation_id": reservation.id,
                "car_id": reservation.car_id,
                "user_id": reservation.user_id,
                "total_price": str(reservation.total_price),
            },
        )
        return reservation
