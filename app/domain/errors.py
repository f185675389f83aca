"""Excepciones de dominio para el sistema de renta de autos."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    status_code = 400

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Validación ===


class ValidationError(DomainError):
    """Error de validación de datos de entrada."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Invalid '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


class InvalidDateRangeError(DomainError):
    """Rango de fechas inválido (fin <= inicio)."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


# === Errores de Autenticación ===


class AuthenticationError(DomainError):
    """Token ausente, desconocido o expirado, o credenciales inválidas."""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message=message, code="AUTHENTICATION_REQUIRED")


class ForbiddenError(DomainError):
    """El usuario autenticado no puede actuar en nombre de otro."""

    status_code = 403

    def __init__(self, message: str):
        super().__init__(message=message, code="FORBIDDEN")


class UsernameTakenError(DomainError):
    status_code = 409

    def __init__(self, username: str):
        super().__init__(message="User already exists", code="USERNAME_TAKEN")
        self.username = username


# === Errores de Catálogo ===


class CarNotFoundError(DomainError):
    """El auto no existe."""

    status_code = 404

    def __init__(self, car_id: int):
        super().__init__(message=f"Car not found: {car_id}", code="CAR_NOT_FOUND")
        self.car_id = car_id


class UserNotFoundError(DomainError):
    status_code = 404

    def __init__(self, user_id: int):
        super().__init__(message=f"User not found: {user_id}", code="USER_NOT_FOUND")
        self.user_id = user_id


# === Errores de Reservación ===


class ReservationNotFoundError(DomainError):
    """La reservación no existe o no pertenece al usuario."""

    status_code = 404

    def __init__(self, reservation_id: int):
        super().__init__(
            message=f"Reservation not found: {reservation_id}",
            code="RESERVATION_NOT_FOUND",
        )
        self.reservation_id = reservation_id


class ReservationConflictError(DomainError):
    """El auto ya tiene una reservación confirmada que se traslapa."""

    status_code = 409

    def __init__(self, car_id: int, conflicting_reservation_id: int):
        super().__init__(
            message="Car is not available for selected dates",
            code="RESERVATION_CONFLICT",
        )
        self.car_id = car_id
        self.conflicting_reservation_id = conflicting_reservation_id


class InvalidReservationStatusError(DomainError):
    """El estado de la reservación no permite la operación."""

    status_code = 409

    def __init__(self, current_status: str, expected_status: str | list[str], operation: str):
        expected = expected_status if isinstance(expected_status, str) else ", ".join(expected_status)
        super().__init__(
            message=f"Cannot {operation}: current status '{current_status}', expected '{expected}'",
            code="INVALID_RESERVATION_STATUS",
        )
        self.current_status = current_status
        self.expected_status = expected_status
        self.operation = operation


# === Errores de Pago ===


class PaymentValidationError(DomainError):
    """Los datos de la tarjeta no tienen un formato válido."""

    status_code = 422

    def __init__(self, message: str):
        super().__init__(message=message, code="PAYMENT_VALIDATION_ERROR")


class DuplicatePaymentError(DomainError):
    """La reservación ya tiene un pago registrado."""

    status_code = 409

    def __init__(self, reservation_id: int):
        super().__init__(
            message="Reservation already has a payment",
            code="DUPLICATE_PAYMENT",
        )
        self.reservation_id = reservation_id
