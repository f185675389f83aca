"""
Capa de Dominio - Renta de autos.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects, reglas de precio y disponibilidad, y
excepciones de dominio.

Estructura:
- entities/: Entidades del dominio (Car, Reservation, Payment, User)
- value_objects/: Objetos de valor inmutables (DateRange, CardDetails)
- pricing.py: Precio por días y add-ons
- availability.py: Detección de traslapes entre reservaciones
- reporting.py: Agregación de reportes diarios y por usuario
- errors.py: Excepciones específicas del dominio
"""

from app.domain.entities import (
    Car,
    CarType,
    Location,
    Payment,
    PaymentStatus,
    Reservation,
    ReservationStatus,
    Session,
    User,
    UserRole,
)
from app.domain.errors import (
    AuthenticationError,
    CarNotFoundError,
    DomainError,
    DuplicatePaymentError,
    ForbiddenError,
    InvalidDateRangeError,
    InvalidReservationStatusError,
    PaymentValidationError,
    ReservationConflictError,
    ReservationNotFoundError,
    UsernameTakenError,
    UserNotFoundError,
    ValidationError,
)
from app.domain.value_objects import CardDetails, DateRange

__all__ = [
    # Entities
    "Car",
    "CarType",
    "Location",
    "Reservation",
    "ReservationStatus",
    "Payment",
    "PaymentStatus",
    "Session",
    "User",
    "UserRole",
    # Value Objects
    "CardDetails",
    "DateRange",
    # Errors
    "DomainError",
    "AuthenticationError",
    "CarNotFoundError",
    "DuplicatePaymentError",
    "ForbiddenError",
    "InvalidDateRangeError",
    "InvalidReservationStatusError",
    "PaymentValidationError",
    "ReservationConflictError",
    "ReservationNotFoundError",
    "UsernameTakenError",
    "UserNotFoundError",
    "ValidationError",
]
