from pydantic import Field, field_validator

from app.api.schemas.common import CamelModel, CamelRequest
from app.domain.entities.user import UserRole


class CredentialsRequest(CamelRequest):
    username: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=1, max_length=256)

    @field_validator("username")
    @classmethod
    def normalize_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username must include at least one non-space character")
        return value


class UserResponse(CamelModel):
    id: int
    username: str
    role: UserRole


class AuthResponse(CamelModel):
    token: str
    user: UserResponse
