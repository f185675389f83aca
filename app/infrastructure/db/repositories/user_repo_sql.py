from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.user_repo import SessionRepo, UserRepo
from app.domain.entities.user import Session, User, UserRole
from app.domain.errors import UsernameTakenError
from app.infrastructure.db.tables import sessions, users


class UserRepoSQL(UserRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: int) -> User | None:
        return await self._fetch_one(users.c.id == user_id)

    async def get_by_username(self, username: str) -> User | None:
        return await self._fetch_one(users.c.username == username)

    async def create(self, user: User) -> User:
        stmt = insert(users).values(
            username=user.username,
            password_hash=user.password_hash,
            password_salt=user.password_salt,
            role=user.role.value,
            created_at=user.created_at,
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as exc:
            raise UsernameTakenError(user.username) from exc
        user.id = result.inserted_primary_key[0]
        return user

    async def _fetch_one(self, clause) -> User | None:
        result = await self._session.execute(select(users).where(clause).limit(1))
        row = result.mappings().first()
        if not row:
            return None
        return User(
            id=row["id"],
            username=row["username"],
            role=UserRole(row["role"]),
            password_hash=row["password_hash"],
            password_salt=row["password_salt"],
            created_at=row["created_at"],
        )


class SessionRepoSQL(SessionRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, session: Session) -> Session:
        await self._session.execute(
            insert(sessions).values(
                token=session.token,
                user_id=session.user_id,
                created_at=session.created_at,
                expires_at=session.expires_at,
            )
        )
        return session

    async def get(self, token: str) -> Session | None:
        stmt = select(sessions).where(sessions.c.token == token).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return Session(
            token=row["token"],
            user_id=row["user_id"],
            created_at=row["created_at"],
            expires_at=row["expires_at"],
        )

    async def delete(self, token: str) -> None:
        await self._session.execute(delete(sessions).where(sessions.c.token == token))
