"""Implementación real del generador de tokens de sesión."""

import secrets

from app.application.interfaces.credentials import TokenGenerator


class TokenGeneratorImpl(TokenGenerator):
    """
    Genera tokens opacos criptográficamente seguros.

    Para testing, usar FakeTokenGenerator de application.interfaces.credentials.
    """

    TOKEN_BYTES = 32

    def generate_session_token(self) -> str:
        """43 caracteres URL-safe."""
        return secrets.token_urlsafe(self.TOKEN_BYTES)
