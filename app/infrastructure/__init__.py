"""
Capa de Infraestructura - Sistema de Renta de Autos.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tablas, motor, repositorios SQL, consultas de reportes y datos semilla
- services/: Servicios de infraestructura (Clock, tokens, hashing)
"""

from app.infrastructure.db.queries.report_query_sql import ReportQuerySQL
from app.infrastructure.db.repositories.car_repo_sql import CarRepoSQL, LocationRepoSQL
from app.infrastructure.db.repositories.payment_repo_sql import PaymentRepoSQL
from app.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from app.infrastructure.db.repositories.user_repo_sql import SessionRepoSQL, UserRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.services import ClockImpl, Sha256PasswordHasher, TokenGeneratorImpl

__all__ = [
    # Database - Repositories SQL
    "CarRepoSQL",
    "LocationRepoSQL",
    "PaymentRepoSQL",
    "ReservationRepoSQL",
    "SessionRepoSQL",
    "UserRepoSQL",
    "ReportQuerySQL",
    "SQLAlchemyTransactionManager",
    # Services
    "ClockImpl",
    "Sha256PasswordHasher",
    "TokenGeneratorImpl",
]
