"""
Capa de Aplicación - Sistema de Renta de Autos.

Esta capa contiene los casos de uso e interfaces (puertos).
Orquesta la lógica de negocio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso del sistema
- interfaces/: Puertos (contratos para adaptadores)
"""

from app.application.interfaces import (
    CarFilter,
    CarRepo,
    Clock,
    FakeClock,
    FakeTokenGenerator,
    LocationRepo,
    PasswordHasher,
    PaymentFilter,
    PaymentRepo,
    ReportQuery,
    ReservationFilter,
    ReservationRepo,
    SessionRepo,
    TokenGenerator,
    TransactionManager,
    UserRepo,
)

__all__ = [
    # Interfaces - Repositories
    "CarFilter",
    "CarRepo",
    "LocationRepo",
    "PaymentFilter",
    "PaymentRepo",
    "ReservationFilter",
    "ReservationRepo",
    "SessionRepo",
    "UserRepo",
    "ReportQuery",
    # Interfaces - Infrastructure
    "TransactionManager",
    # Interfaces - Utilities
    "Clock",
    "FakeClock",
    "PasswordHasher",
    "TokenGenerator",
    "FakeTokenGenerator",
]
