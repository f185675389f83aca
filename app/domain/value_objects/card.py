"""Value Object CardDetails - datos de tarjeta validados solo por forma."""

import re
from dataclasses import dataclass

from app.domain.errors import PaymentValidationError

_CARD_NUMBER_RE = re.compile(r"[0-9]{12,19}")
_EXPIRY_RE = re.compile(r"(0[1-9]|1[0-2])/[0-9]{2}")
_CVC_RE = re.compile(r"[0-9]{3,4}")
_SEPARATORS_RE = re.compile(r"[\s-]+")


def luhn_valid(number: str) -> bool:
    """Algoritmo de Luhn sobre una cadena de dígitos ASCII."""
    total = 0
    for index, char in enumerate(reversed(number)):
        digit = int(char)
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


@dataclass(frozen=True)
class CardDetails:
    """
    Tarjeta de pago validada por forma (no se procesa ningún cargo real).

    Solo `last4` debe persistirse o aparecer en logs; `number` y `cvc`
    nunca salen de la capa de aplicación.
    """

    number: str
    holder_name: str
    expiry: str
    cvc: str

    def __post_init__(self) -> None:
        cleaned = _SEPARATORS_RE.sub("", self.number)
        object.__setattr__(self, "number", cleaned)

        if not _CARD_NUMBER_RE.fullmatch(cleaned) or not luhn_valid(cleaned):
            raise PaymentValidationError("Invalid card number")
        if not _EXPIRY_RE.fullmatch(self.expiry):
            raise PaymentValidationError("Invalid expiry format (MM/YY)")
        if not _CVC_RE.fullmatch(self.cvc):
            raise PaymentValidationError("Invalid CVC")
        if not self.holder_name.strip():
            raise PaymentValidationError("Cardholder name is required")

    @property
    def last4(self) -> str:
        return self.number[-4:]

    def __repr__(self) -> str:
        return f"CardDetails(last4={self.last4!r}, expiry={self.expiry!r})"
