"""Detección de conflictos y disponibilidad de autos."""

from collections.abc import Iterable
from datetime import date

from app.domain.entities.reservation import Reservation
from app.domain.value_objects.date_range import DateRange


def find_conflict(
    candidate: DateRange,
    reservations: Iterable[Reservation],
    exclude_id: int | None = None,
) -> Reservation | None:
    """
    Retorna la primera reservación confirmada que se traslapa con `candidate`.

    Las reservaciones pendientes y canceladas no ocupan el auto.
    `exclude_id` permite revalidar una reservación sin chocar consigo misma.
    """
    for reservation in reservations:
        if not reservation.is_confirmed:
            continue
        if exclude_id is not None and reservation.id == exclude_id:
            continue
        if reservation.date_range.overlaps(candidate):
            return reservation
    return None


def is_occupied_on(day: date, reservations: Iterable[Reservation]) -> bool:
    """True si alguna reservación confirmada cubre el día dado."""
    return any(r.is_confirmed and r.date_range.contains(day) for r in reservations)
