from app.domain.entities.user import Session, User


class UserRepo:
    async def get_by_id(self, user_id: int) -> User | None:
        raise NotImplementedError

    async def get_by_username(self, username: str) -> User | None:
        raise NotImplementedError

    async def create(self, user: User) -> User:
        """Raises UsernameTakenError when the username already exists."""
        raise NotImplementedError


class SessionRepo:
    async def create(self, session: Session) -> Session:
        raise NotImplementedError

    async def get(self, token: str) -> Session | None:
        raise NotImplementedError

    async def delete(self, token: str) -> None:
        raise NotImplementedError
