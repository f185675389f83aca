from datetime import timedelta
from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.application.interfaces.clock import Clock
from app.application.interfaces.credentials import PasswordHasher, TokenGenerator
from app.application.use_cases.authenticate import (
    LoginUseCase,
    LogoutUseCase,
    ResolveSessionUseCase,
    SignupUseCase,
)
from app.application.use_cases.cancel_reservation import CancelReservationUseCase
from app.application.use_cases.catalog import GetCarUseCase, ListCarsUseCase, SearchLocationsUseCase
from app.application.use_cases.create_reservation import CreateReservationUseCase
from app.application.use_cases.get_reports import (
    GetDailyRentalsReportUseCase,
    GetUserRentalReportUseCase,
)
from app.application.use_cases.get_reservation import GetReservationUseCase, ListReservationsUseCase
from app.application.use_cases.pay_reservation import ListPaymentsUseCase, PayReservationUseCase
from app.application.use_cases.update_reservation import UpdateReservationUseCase
from app.config import Settings, get_settings
from app.domain.entities.user import User
from app.infrastructure.db.queries.report_query_sql import ReportQuerySQL
from app.infrastructure.db.repositories.car_repo_sql import CarRepoSQL, LocationRepoSQL
from app.infrastructure.db.repositories.payment_repo_sql import PaymentRepoSQL
from app.infrastructure.db.repositories.reservation_repo_sql import ReservationRepoSQL
from app.infrastructure.db.repositories.user_repo_sql import SessionRepoSQL, UserRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.services.clock_impl import ClockImpl
from app.infrastructure.services.password_hasher_impl import Sha256PasswordHasher
from app.infrastructure.services.token_generator_impl import TokenGeneratorImpl

bearer_scheme = HTTPBearer(auto_error=False, description="Session token from /api/login")


@lru_cache(maxsize=1)
def get_clock() -> Clock:
    return ClockImpl()


@lru_cache(maxsize=1)
def get_token_generator() -> TokenGenerator:
    return TokenGeneratorImpl()


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return Sha256PasswordHasher()


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession = Depends(get_db_session),
    clock: Clock = Depends(get_clock),
    token_generator: TokenGenerator = Depends(get_token_generator),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    reservation_repo = ReservationRepoSQL(session)
    car_repo = CarRepoSQL(session)
    location_repo = LocationRepoSQL(session)
    user_repo = UserRepoSQL(session)
    session_repo = SessionRepoSQL(session)
    payment_repo = PaymentRepoSQL(session)
    report_query = ReportQuerySQL(session)
    tx_manager = SQLAlchemyTransactionManager(session)
    session_ttl = timedelta(hours=settings.session_ttl_hours)

    return {
        "resolve_session": ResolveSessionUseCase(user_repo, session_repo, clock),
        "signup": SignupUseCase(
            user_repo=user_repo,
            session_repo=session_repo,
            password_hasher=password_hasher,
            token_generator=token_generator,
            transaction_manager=tx_manager,
            clock=clock,
            session_ttl=session_ttl,
        ),
        "login": LoginUseCase(
            user_repo=user_repo,
            session_repo=session_repo,
            password_hasher=password_hasher,
            token_generator=token_generator,
            transaction_manager=tx_manager,
            clock=clock,
            session_ttl=session_ttl,
        ),
        "logout": LogoutUseCase(session_repo=session_repo, transaction_manager=tx_manager),
        "list_cars": ListCarsUseCase(car_repo, clock),
        "get_car": GetCarUseCase(car_repo, clock),
        "search_locations": SearchLocationsUseCase(location_repo),
        "create_reservation": CreateReservationUseCase(
            reservation_repo=reservation_repo,
            car_repo=car_repo,
            user_repo=user_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "update_reservation": UpdateReservationUseCase(
            reservation_repo=reservation_repo,
            car_repo=car_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "cancel_reservation": CancelReservationUseCase(
            reservation_repo=reservation_repo,
            car_repo=car_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "get_reservation": GetReservationUseCase(reservation_repo),
        "list_reservations": ListReservationsUseCase(reservation_repo),
        "pay_reservation": PayReservationUseCase(
            reservation_repo=reservation_repo,
            car_repo=car_repo,
            payment_repo=payment_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "list_payments": ListPaymentsUseCase(payment_repo),
        "daily_rentals_report": GetDailyRentalsReportUseCase(report_query),
        "user_rentals_report": GetUserRentalReportUseCase(report_query),
    }


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    return credentials.credentials if credentials else None


async def get_current_user(
    token: str | None = Depends(get_bearer_token),
    use_cases=Depends(get_use_cases),
) -> User:
    return await use_cases["resolve_session"].execute(token)
