import logging
from datetime import timedelta

from app.application.interfaces.car_repo import CarRepo
from app.application.interfaces.clock import Clock
from app.application.interfaces.reservation_repo import ReservationRepo
from app.domain.availability import is_occupied_on
from app.domain.value_objects.date_range import DateRange


class RefreshCarAvailability:
    """
    Recompute the cached `available` flag of a car.

    The flag means "no confirmed reservation occupies the car today". It is
    a hint for list views; conflict decisions never read it. Must run inside
    the caller's transaction.
    """

    def __init__(self, car_repo: CarRepo, reservation_repo: ReservationRepo, clock: Clock) -> None:
        self._car_repo = car_repo
        self._reservation_repo = reservation_repo
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def __call__(self, car_id: int) -> bool:
        today = self._clock.today()
        window = DateRange(start=today, end=today + timedelta(days=1))
        covering = await self._reservation_repo.list_overlapping(car_id, window)
        available = not is_occupied_on(today, covering)
        await self._car_repo.set_available(car_id, available)
        self._logger.debug(
            "Car availability refreshed",
            extra={"car_id": car_id, "available": available},
        )
        return available
