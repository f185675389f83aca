"""Entidad Payment - pago registrado contra una reservación."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PaymentStatus(str, Enum):
    """Estados posibles de un pago."""

    PENDING = "pending"
    AUTHORIZED = "authorized"
    CAPTURED = "captured"
    FAILED = "failed"


@dataclass
class Payment:
    """
    Pago asociado a una reservación (a lo más uno por reservación).

    Inmutable una vez creado; solo guarda los últimos 4 dígitos de la tarjeta.
    """

    id: int | None = None
    reservation_id: int = 0
    user_id: int = 0

    amount: Decimal = Decimal("0.00")
    method: str = "card"
    card_last4: str | None = None

    status: PaymentStatus = PaymentStatus.PENDING

    created_at: datetime | None = None

    @property
    def is_successful(self) -> bool:
        return self.status == PaymentStatus.CAPTURED

    @classmethod
    def captured(
        cls,
        reservation_id: int,
        user_id: int,
        amount: Decimal,
        method: str,
        card_last4: str,
    ) -> "Payment":
        """Factory para el pago capturado por el stub."""
        return cls(
            reservation_id=reservation_id,
            user_id=user_id,
            amount=amount,
            method=method,
            card_last4=card_last4,
            status=PaymentStatus.CAPTURED,
        )
