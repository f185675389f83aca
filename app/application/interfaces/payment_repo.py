from dataclasses import dataclass
from typing import Sequence

from app.domain.entities.payment import Payment


@dataclass
class PaymentFilter:
    user_id: int | None = None
    reservation_id: int | None = None


class PaymentRepo:
    async def get_by_reservation(self, reservation_id: int) -> Payment | None:
        raise NotImplementedError

    async def create(self, payment: Payment) -> Payment:
        """Raises DuplicatePaymentError when the reservation already has a payment."""
        raise NotImplementedError

    async def list(self, filters: PaymentFilter) -> Sequence[Payment]:
        raise NotImplementedError
