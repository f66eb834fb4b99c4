# ozone_coin/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass

from ozone_coin.core import errors as api_errors
from ozone_coin.services._shared.errors import (
    AuthenticationError,
    InvalidInputError,
    NotFoundError,
    ServiceError,
    StoreError,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data.

    :param request_id: Correlation id for logging/tracing.
    :param client_ip: Originating client address, when known.
    """

    request_id: str | None = None
    client_ip: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the request-scoped context.
    * Centralize translation of domain errors into API errors.

    Notes
    -----
    - Services never build HTTP responses themselves.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param ctx: Optional request-scoped context (tracing).
        :type ctx: ServiceContext | None
        """
        self.ctx = ctx or ServiceContext()

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service or store.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound()

        if isinstance(exc, AuthenticationError):
            # → 401 Unauthorized
            return api_errors.Unauthorized(str(exc))

        if isinstance(exc, StoreError):
            # → 500, backend message only as details
            return api_errors.InternalError(str(exc), details=exc.cause)

        if isinstance(exc, InvalidInputError | ServiceError):
            # → 400 Bad Request
            return api_errors.BadRequest(str(exc))

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc
