"""Interfaces de credenciales - Puertos para tokens de sesión y hashing."""

import secrets
from abc import ABC, abstractmethod


class TokenGenerator(ABC):
    """
    Puerto para generación de tokens de sesión opacos.

    Permite inyectar implementaciones fake para testing determinista.
    """

    @abstractmethod
    def generate_session_token(self) -> str:
        raise NotImplementedError


class FakeTokenGenerator(TokenGenerator):
    """
    Implementación fake para testing.

    Genera valores predecibles para pruebas deterministas.
    """

    def __init__(self, prefix: str = "token"):
        self._prefix = prefix
        self._counter = 0

    def generate_session_token(self) -> str:
        self._counter += 1
        return f"{self._prefix}-{self._counter:06d}"

    def reset(self) -> None:
        self._counter = 0


class PasswordHasher(ABC):
    """Puerto para derivar y verificar hashes de contraseña."""

    @abstractmethod
    def hash(self, password: str, salt_hex: str | None = None) -> tuple[str, str]:
        """Retorna (digest_hex, salt_hex)."""
        raise NotImplementedError

    def verify(self, password: str, digest_hex: str, salt_hex: str) -> bool:
        candidate, _ = self.hash(password, salt_hex)
        return secrets.compare_digest(candidate, digest_hex)
