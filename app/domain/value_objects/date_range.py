"""Value Object DateRange - rango de fechas de una reservación."""

from dataclasses import dataclass
from datetime import date

from app.domain.errors import InvalidDateRangeError


@dataclass(frozen=True)
class DateRange:
    """
    Value Object inmutable que representa un rango semiabierto de días.

    El día `end` no está incluido: una renta del 1 al 3 ocupa los días 1 y 2,
    y el auto puede volver a rentarse a partir del día 3.

    Attributes:
        start: Día de recogida (incluido).
        end: Día de devolución (excluido).
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidDateRangeError("End date must be after start date")

    def overlaps(self, other: "DateRange") -> bool:
        """Verifica si este rango comparte al menos un día con otro."""
        return other.start < self.end and other.end > self.start

    def contains(self, day: date) -> bool:
        """Verifica si el día está ocupado por el rango."""
        return self.start <= day < self.end


def rental_days(start: date, end: date) -> int:
    """
    Calcula los días de renta entre dos fechas.

    Regla de negocio: un rango vacío o del mismo día cuenta como un día.
    """
    return max(1, (end - start).days)
