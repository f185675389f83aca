"""Entidades de identidad: User y Session."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


@dataclass
class User:
    """Usuario autenticable. El hash y la sal nunca se exponen al cliente."""

    id: int | None = None
    username: str = ""
    role: UserRole = UserRole.CUSTOMER
    password_hash: str | None = None
    password_salt: str | None = None
    created_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def can_access(self, owner_id: int) -> bool:
        """Un usuario ve sus propios recursos; un admin ve todos."""
        return self.is_admin or self.id == owner_id


@dataclass
class Session:
    token: str
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
