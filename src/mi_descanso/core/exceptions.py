from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class MissingRange(ValidationError):
    def __init__(self) -> None:
        super().__init__("Selecciona un rango de fechas")


class EmptyBusinessDayRange(ValidationError):
    def __init__(self) -> None:
        super().__init__("El rango seleccionado no contiene días laborables")


class InsufficientBalance(ValidationError):
    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"No tienes suficientes días disponibles. Te quedan {remaining} días.")


class NoActiveOwner(AuthenticationError):
    """Raised when an owner-scoped operation runs without a resolved identity."""

    def __init__(self) -> None:
        super().__init__("No hay ningún usuario activo")
