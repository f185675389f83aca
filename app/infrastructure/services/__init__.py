"""Servicios de infraestructura."""

from app.infrastructure.services.clock_impl import ClockImpl
from app.infrastructure.services.password_hasher_impl import Sha256PasswordHasher
from app.infrastructure.services.token_generator_impl import TokenGeneratorImpl

__all__ = [
    "ClockImpl",
    "Sha256PasswordHasher",
    "TokenGeneratorImpl",
]
