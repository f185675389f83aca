"""
Interfaces (Puertos) de la capa de aplicación.

Define los contratos que deben implementar los adaptadores de infraestructura.
"""

from app.application.interfaces.car_repo import CarFilter, CarRepo, LocationRepo
from app.application.interfaces.clock import Clock, FakeClock
from app.application.interfaces.credentials import (
    FakeTokenGenerator,
    PasswordHasher,
    TokenGenerator,
)
from app.application.interfaces.payment_repo import PaymentFilter, PaymentRepo
from app.application.interfaces.report_query import ReportQuery
from app.application.interfaces.reservation_repo import ReservationFilter, ReservationRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.user_repo import SessionRepo, UserRepo

__all__ = [
    # Repositories
    "CarFilter",
    "CarRepo",
    "LocationRepo",
    "PaymentFilter",
    "PaymentRepo",
    "ReservationFilter",
    "ReservationRepo",
    "SessionRepo",
    "UserRepo",
    # Queries
    "ReportQuery",
    # Services
    "Clock",
    "FakeClock",
    "PasswordHasher",
    "TokenGenerator",
    "FakeTokenGenerator",
    # Infrastructure
    "TransactionManager",
]
