"""Entidad Reservation - Agregado raíz del dominio."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from app.domain.errors import InvalidReservationStatusError
from app.domain.value_objects.date_range import DateRange


class ReservationStatus(str, Enum):
    """Estados posibles de una reservación."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass
class Reservation:
    """
    Entidad principal del dominio - Agregado Raíz.

    Una reservación ocupa su auto durante [start_date, end_date) mientras
    esté confirmada. Nunca se borra: cancelar es una transición de estado
    que conserva el historial para los reportes.
    """

    # Identificadores
    id: int | None = None
    car_id: int = 0
    user_id: int = 0

    # Fechas
    start_date: date | None = None
    end_date: date | None = None

    # Financieros
    total_price: Decimal = Decimal("0.00")

    # Add-ons
    gps: bool = False
    toll_pass: bool = False

    # Estado
    status: ReservationStatus = ReservationStatus.PENDING

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # === Propiedades calculadas ===

    @property
    def date_range(self) -> DateRange:
        """Retorna el rango de fechas como Value Object."""
        return DateRange(start=self.start_date, end=self.end_date)

    @property
    def is_confirmed(self) -> bool:
        return self.status == ReservationStatus.CONFIRMED

    @property
    def is_cancelled(self) -> bool:
        return self.status == ReservationStatus.CANCELLED

    # === Métodos de negocio ===

    def confirm(self) -> None:
        """pending -> confirmed."""
        if self.status != ReservationStatus.PENDING:
            raise InvalidReservationStatusError(
                current_status=self.status.value,
                expected_status=ReservationStatus.PENDING.value,
                operation="confirm reservation",
            )
        self.status = ReservationStatus.CONFIRMED

    def cancel(self) -> bool:
        """
        confirmed -> cancelled.

        Cancelar una reservación ya cancelada no hace nada. Retorna True
        solo si hubo transición.
        """
        if self.status == ReservationStatus.CANCELLED:
            return False
        if self.status != ReservationStatus.CONFIRMED:
            raise InvalidReservationStatusError(
                current_status=self.status.value,
                expected_status=ReservationStatus.CONFIRMED.value,
                operation="cancel reservation",
            )
        self.status = ReservationStatus.CANCELLED
        return True

    def ensure_modifiable(self) -> None:
        if self.status != ReservationStatus.CONFIRMED:
            raise InvalidReservationStatusError(
                current_status=self.status.value,
                expected_status=ReservationStatus.CONFIRMED.value,
                operation="update reservation",
            )
