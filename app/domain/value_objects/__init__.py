"""Value Objects del dominio de renta de autos."""

from app.domain.value_objects.card import CardDetails, luhn_valid
from app.domain.value_objects.date_range import DateRange, rental_days

__all__ = [
    "CardDetails",
    "DateRange",
    "luhn_valid",
    "rental_days",
]
