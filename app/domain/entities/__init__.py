"""Entidades del dominio de renta de autos."""

from app.domain.entities.car import Car, CarType, Location
from app.domain.entities.payment import Payment, PaymentStatus
from app.domain.entities.reservation import Reservation, ReservationStatus
from app.domain.entities.user import Session, User, UserRole

__all__ = [
    # Catalog
    "Car",
    "CarType",
    "Location",
    # Reservation
    "Reservation",
    "ReservationStatus",
    # Payment
    "Payment",
    "PaymentStatus",
    # Identity
    "Session",
    "User",
    "UserRole",
]
