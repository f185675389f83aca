import logging
from dataclasses import dataclass
from datetime import timedelta

from app.api.schemas.auth import CredentialsRequest
from app.application.interfaces.clock import Clock
from app.application.interfaces.credentials import PasswordHasher, TokenGenerator
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.user_repo import SessionRepo, UserRepo
from app.domain.entities.user import Session, User, UserRole
from app.domain.errors import AuthenticationError, UsernameTakenError


@dataclass
class AuthResult:
    token: str
    user: User


class _SessionIssuer:
    def __init__(
        self,
        session_repo: SessionRepo,
        token_generator: TokenGenerator,
        clock: Clock,
        session_ttl: timedelta,
    ) -> None:
        self._session_repo = session_repo
        self._token_generator = token_generator
        self._clock = clock
        self._session_ttl = session_ttl

    async def issue(self, user: User) -> str:
        now = self._clock.now()
        session = Session(
            token=self._token_generator.generate_session_token(),
            user_id=user.id,
            created_at=now,
            expires_at=now + self._session_ttl,
        )
        await self._session_repo.create(session)
        return session.token


class SignupUseCase:
    def __init__(
        self,
        user_repo: UserRepo,
        session_repo: SessionRepo,
        password_hasher: PasswordHasher,
        token_generator: TokenGenerator,
        transaction_manager: TransactionManager,
        clock: Clock,
        session_ttl: timedelta,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._issuer = _SessionIssuer(session_repo, token_generator, clock, session_ttl)
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CredentialsRequest) -> AuthResult:
        async with self._transaction_manager.start():
            if await self._user_repo.get_by_username(request.username):
                raise UsernameTakenError(request.username)

            digest, salt = self._password_hasher.hash(request.password)
            user = await self._user_repo.create(
                User(
                    username=request.username,
                    role=UserRole.CUSTOMER,
                    password_hash=digest,
                    password_salt=salt,
                    created_at=self._clock.now(),
                )
            )
            token = await self._issuer.issue(user)

        self._logger.info("User signed up", extra={"user_id": user.id})
        return AuthResult(token=token, user=user)


class LoginUseCase:
    def __init__(
        self,
        user_repo: UserRepo,
        session_repo: SessionRepo,
        password_hasher: PasswordHasher,
        token_generator: TokenGenerator,
        transaction_manager: TransactionManager,
        clock: Clock,
        session_ttl: timedelta,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._transaction_manager = transaction_manager
        self._issuer = _SessionIssuer(session_repo, token_generator, clock, session_ttl)
        self._logger = logging.getLogger(__name__)

    async def execute(self, request: CredentialsRequest) -> AuthResult:
        async with self._transaction_manager.start():
            user = await self._user_repo.get_by_username(request.username)
            if not user or not self._password_hasher.verify(
                request.password, user.password_hash, user.password_salt
            ):
                self._logger.info("Login rejected", extra={"username": request.username})
                raise AuthenticationError("Invalid credentials")
            token = await self._issuer.issue(user)

        return AuthResult(token=token, user=user)


class ResolveSessionUseCase:
    """Maps a bearer token to its user; unknown or expired tokens are rejected."""

    def __init__(self, user_repo: UserRepo, session_repo: SessionRepo, clock: Clock) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._clock = clock

    async def execute(self, token: str | None) -> User:
        if not token:
            raise AuthenticationError()
        session = await self._session_repo.get(token)
        if not session or session.is_expired(self._clock.now()):
            raise AuthenticationError("Invalid or expired session")
        user = await self._user_repo.get_by_id(session.user_id)
        if not user:
            raise AuthenticationError("Invalid or expired session")
        return user


class LogoutUseCase:
    def __init__(self, session_repo: SessionRepo, transaction_manager: TransactionManager) -> None:
        self._session_repo = session_repo
        self._transaction_manager = transaction_manager

    async def execute(self, token: str) -> None:
        async with self._transaction_manager.start():
            await self._session_repo.delete(token)
