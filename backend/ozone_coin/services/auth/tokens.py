"""Stateless admin bearer tokens.

Format: ``<payload>.<mac>`` where ``payload`` is the URL-safe, unpadded
base64 of the canonical JSON ``{"exp": <epoch ms>, "role": 1}`` and ``mac``
is the HMAC-SHA-256 of the encoded payload under the server secret, encoded
the same way. There is no server-side session or revocation list; a token is
good until ``exp``.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from typing import Any, Final

from itsdangerous import BadData, Signer
from itsdangerous.encoding import base64_decode, base64_encode

ADMIN_ROLE: Final[int] = 1
TOKEN_TTL_MS: Final[int] = 7 * 24 * 60 * 60 * 1000
SEPARATOR: Final[str] = "."


def now_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class TokenCodec:
    """Issue and verify admin bearer tokens signed with one process-wide key.

    :param secret: HMAC key. Immutable for the life of the codec.
    :param ttl_ms: Token lifetime in milliseconds (7 days by default).
    """

    def __init__(self, secret: str, *, ttl_ms: int = TOKEN_TTL_MS) -> None:
        self.ttl_ms = ttl_ms
        # key_derivation="none": the MAC key is the secret itself
        self._signer = Signer(
            secret,
            sep=SEPARATOR,
            key_derivation="none",
            digest_method=hashlib.sha256,
        )

    @staticmethod
    def _encode_payload(payload: dict[str, Any]) -> bytes:
        canonical = json.dumps(payload, separators=(",", ":"), sort_keys=True)
        return base64_encode(canonical.encode("utf-8"))

    def issue(self, now_ms: int | None = None) -> str:
        """Return a fresh token expiring ``ttl_ms`` after ``now_ms``."""
        issued_at = now_millis() if now_ms is None else now_ms
        payload = self._encode_payload({"role": ADMIN_ROLE, "exp": issued_at + self.ttl_ms})
        return self._signer.sign(payload).decode("ascii")

    def verify(self, token: Any, now_ms: int | None = None) -> bool:
        """Return ``True`` only for an untampered, unexpired admin token.

        Never raises: malformed input of any kind is simply invalid.
        """
        if not isinstance(token, str) or not token:
            return False
        parts = token.split(SEPARATOR)
        if len(parts) != 2 or not all(parts):
            return False
        try:
            payload_part, mac_part = (p.encode("ascii") for p in parts)
        except UnicodeError:
            return False

        # Compare the encoded MAC text, so every character of it counts
        expected = self._signer.get_signature(payload_part)
        if not hmac.compare_digest(expected, mac_part):
            return False

        try:
            payload = json.loads(base64_decode(payload_part))
        except (BadData, ValueError):
            return False
        if not isinstance(payload, dict):
            return False

        role = payload.get("role")
        if not _is_number(role) or role != ADMIN_ROLE:
            return False
        exp = payload.get("exp")
        if not _is_number(exp):
            return False
        current = now_millis() if now_ms is None else now_ms
        return exp > current
