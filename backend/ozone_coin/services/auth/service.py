# ozone_coin/services/auth/service.py
from __future__ import annotations

import hmac
import logging
from typing import Any

from ozone_coin.services._shared.base import BaseService, ServiceContext
from ozone_coin.services._shared.errors import AuthenticationError
from ozone_coin.services.auth.dto import AdminSettings, LoginIn, LoginOut
from ozone_coin.services.auth.tokens import TokenCodec

BEARER_PREFIX = "Bearer "

log = logging.getLogger(__name__)


def _same_text(submitted: Any, expected: str) -> bool:
    """Exact, constant-time string equality; non-strings never match."""
    if not isinstance(submitted, str):
        return False
    return hmac.compare_digest(submitted.encode("utf-8"), expected.encode("utf-8"))


class AdminAuthService(BaseService):
    """
    Admin gate: credential check and bearer-token authorization.

    There is a single privilege level. Tokens are stateless, so logout is a
    client-side concern and needs nothing from this service.
    """

    def __init__(
        self,
        *,
        settings: AdminSettings,
        codec: TokenCodec | None = None,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        Initialize the service with its immutable configuration.

        :param settings: Admin username, password and token secret.
        :param codec: Token codec; built from ``settings.token_secret`` if omitted.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.settings = settings
        self.codec = codec or TokenCodec(settings.token_secret)

    # ------------------------------------------------------------------ #
    # Login
    # ------------------------------------------------------------------ #

    def authenticate(self, dto: LoginIn, *, now_ms: int | None = None) -> LoginOut:
        """
        Check the submitted credentials and issue a token.

        :param dto: Submitted username/password.
        :param now_ms: Clock override (epoch milliseconds).
        :returns: Fresh admin token.
        :raises AuthenticationError: If either field does not match.
        """
        # Evaluate both comparisons so timing does not reveal which one failed
        user_ok = _same_text(dto.user, self.settings.username)
        password_ok = _same_text(dto.password, self.settings.password)
        if not (user_ok and password_ok):
            log.warning("admin.login_failed ip=%s", self.ctx.client_ip)
            raise AuthenticationError()
        log.info("admin.login_ok ip=%s", self.ctx.client_ip)
        return LoginOut(token=self.codec.issue(now_ms))

    # ------------------------------------------------------------------ #
    # Authorization
    # ------------------------------------------------------------------ #

    def authorize(self, header_value: str | None, *, now_ms: int | None = None) -> bool:
        """
        Decide whether an ``Authorization`` header grants admin access.

        :param header_value: Raw header value, e.g. ``"Bearer <token>"``.
        :param now_ms: Clock override (epoch milliseconds).
        :returns: ``True`` when admitted.
        """
        if not header_value or not header_value.startswith(BEARER_PREFIX):
            return False
        return self.codec.verify(header_value[len(BEARER_PREFIX) :], now_ms)
