from dataclasses import dataclass
from typing import Sequence

from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.value_objects.date_range import DateRange


@dataclass
class ReservationFilter:
    user_id: int | None = None
    status: ReservationStatus | None = None


class ReservationRepo:
    async def get_by_id(self, reservation_id: int) -> Reservation | None:
        raise NotImplementedError

    async def list(self, filters: ReservationFilter) -> Sequence[Reservation]:
        """Newest first (created_at desc, id desc)."""
        raise NotImplementedError

    async def list_overlapping(
        self,
        car_id: int,
        date_range: DateRange,
        exclude_id: int | None = None,
    ) -> Sequence[Reservation]:
        """Confirmed reservations of the car whose range overlaps `date_range`."""
        raise NotImplementedError

    async def create(self, reservation: Reservation) -> Reservation:
        raise NotImplementedError

    async def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
    ) -> Reservation:
        """
        Persist the reservation.

        With `expected_status` the write only applies while the stored row
        still has that status; otherwise InvalidReservationStatusError.
        """
        raise NotImplementedError
