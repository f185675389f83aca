from typing import Sequence

from app.application.interfaces.reservation_repo import ReservationFilter, ReservationRepo
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import User
from app.domain.errors import ReservationNotFoundError


class GetReservationUseCase:
    def __init__(self, reservation_repo: ReservationRepo) -> None:
        self._reservation_repo = reservation_repo

    async def execute(self, reservation_id: int, current_user: User) -> Reservation:
        reservation = await self._reservation_repo.get_by_id(reservation_id)
        # Other users' reservations are reported as missing, not forbidden.
        if not reservation or not current_user.can_access(reservation.user_id):
            raise ReservationNotFoundError(reservation_id)
        return reservation


class ListReservationsUseCase:
    def __init__(self, reservation_repo: ReservationRepo) -> None:
        self._reservation_repo = reservation_repo

    async def execute(
        self,
        current_user: User,
        user_id: int | None = None,
        status: ReservationStatus | None = None,
    ) -> Sequence[Reservation]:
        if not current_user.is_admin:
            user_id = current_user.id
        return await self._reservation_repo.list(ReservationFilter(user_id=user_id, status=status))
