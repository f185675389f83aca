"""Hash de contraseñas con SHA-256 y sal aleatoria por usuario."""

import hashlib
import secrets

from app.application.interfaces.credentials import PasswordHasher


class Sha256PasswordHasher(PasswordHasher):
    SALT_BYTES = 16

    def hash(self, password: str, salt_hex: str | None = None) -> tuple[str, str]:
        """
        Deriva el digest de `salt + password`.

        Args:
            password: Contraseña en claro.
            salt_hex: Sal existente (al verificar); si es None se genera una nueva.

        Returns:
            Tupla (digest_hex, salt_hex).
        """
        if salt_hex is None:
            salt_hex = secrets.token_hex(self.SALT_BYTES)
        digest = hashlib.sha256(bytes.fromhex(salt_hex) + password.encode("utf-8")).hexdigest()
        return digest, salt_hex
