# ozone_coin/services/auth/dto.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for admin login.

    Values are kept as received; non-string input simply never matches.

    :param user: Submitted username.
    :type user: Any
    :param password: Submitted password.
    :type password: Any
    """

    user: Any
    password: Any


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginOut:
    """
    Output DTO for a successful login.

    :param token: Signed admin bearer token.
    :type token: str
    """

    token: str


# ------------------------------ Config DTO -------------------------------- #


@dataclass(frozen=True, slots=True)
class AdminSettings:
    """
    Immutable admin configuration, built once at application start.

    :param username: Accepted admin username.
    :type username: str
    :param password: Accepted admin password.
    :type password: str
    :param token_secret: HMAC key for bearer tokens.
    :type token_secret: str
    """

    username: str
    password: str
    token_secret: str

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> AdminSettings:
        """Build settings from a Flask config mapping.

        ``TOKEN_SECRET`` falls back to ``ADMIN_PASSWORD`` when blank.
        """
        password = str(config.get("ADMIN_PASSWORD") or "")
        return cls(
            username=str(config.get("ADMIN_USER") or ""),
            password=password,
            token_secret=str(config.get("TOKEN_SECRET") or password),
        )

    def __repr__(self) -> str:
        return f"AdminSettings(username={self.username!r}, password=***, token_secret=***)"
