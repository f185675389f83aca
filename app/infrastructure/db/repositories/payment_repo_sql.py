from decimal import Decimal
from typing import Sequence

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.payment_repo import PaymentFilter, PaymentRepo
from app.domain.entities.payment import Payment, PaymentStatus
from app.domain.errors import DuplicatePaymentError
from app.infrastructure.db.tables import payments


class PaymentRepoSQL(PaymentRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_reservation(self, reservation_id: int) -> Payment | None:
        stmt = select(payments).where(payments.c.reservation_id == reservation_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_payment(row) if row else None

    async def create(self, payment: Payment) -> Payment:
        stmt = insert(payments).values(
            reservation_id=payment.reservation_id,
            user_id=payment.user_id,
            amount=payment.amount,
            method=payment.method,
            card_last4=payment.card_last4,
            status=payment.status.value,
            created_at=payment.created_at,
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicatePaymentError(payment.reservation_id) from exc
        payment.id = result.inserted_primary_key[0]
        return payment

    async def list(self, filters: PaymentFilter) -> Sequence[Payment]:
        stmt = select(payments)
        if filters.user_id is not None:
            stmt = stmt.where(payments.c.user_id == filters.user_id)
        if filters.reservation_id is not None:
            stmt = stmt.where(payments.c.reservation_id == filters.reservation_id)
        stmt = stmt.order_by(payments.c.created_at.desc(), payments.c.id.desc())
        result = await self._session.execute(stmt)
        return [self._map_payment(row) for row in result.mappings().all()]

    def _map_payment(self, row) -> Payment:
        return Payment(
            id=row["id"],
            reservation_id=row["reservation_id"],
            user_id=row["user_id"],
            amount=Decimal(row["amount"]),
            method=row["method"],
            card_last4=row["card_last4"],
            status=PaymentStatus(row["status"]),
            created_at=row["created_at"],
        )
