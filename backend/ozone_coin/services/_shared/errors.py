"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between the stores, the
admin gate and the API layer.

The translation to HTTP responses is handled by ``ozone_coin/core/errors.py``
via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from stores or domain logic.
    - The API layer translates them to ``APIError`` subclasses.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class InvalidInputError(ServiceError):
    """Raised when input is missing or malformed. No side effect was performed."""

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message)


class AuthenticationError(ServiceError):
    """Raised when submitted admin credentials do not match."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the store.

    :param entity: Entity name (e.g., "Student").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str
    """

    entity: str
    key: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"


class StoreError(ServiceError):
    """
    Raised when the backing store fails while mutating data.

    :param message: Safe, short summary for clients.
    :param cause: Text of the underlying backend error, if any.
    """

    def __init__(self, message: str, cause: str | None = None) -> None:
        super().__init__(message)
        self.cause = cause
