"""Input normalisation rules shared by every ``ClassStore`` backend."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any
from uuid import UUID, uuid4

from ozone_coin.services._shared.dto import Coins
from ozone_coin.services._shared.errors import InvalidInputError

# Largest delta accepted per call; integers up to here are exact as doubles
MAX_AMOUNT = 2**53


def new_id() -> str:
    """Return a fresh opaque identifier (32 lowercase hex chars)."""
    return uuid4().hex


def normalize_id(raw: Any) -> str | None:
    """Return the canonical form of ``raw`` or ``None`` when it is malformed."""
    if not isinstance(raw, str):
        return None
    try:
        return UUID(raw.strip()).hex
    except ValueError:
        return None


def clean_name(raw: Any, *, message: str = "Name required") -> str:
    """Trim ``raw`` and require a non-empty string."""
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInputError(message)
    return raw.strip()


def coerce_amount(raw: Any) -> Coins:
    """Return ``raw`` as a finite number no larger than ``MAX_AMOUNT`` in magnitude.

    Numeric strings are accepted (``"5"``, ``"-2.5"``); booleans, ``None``
    and anything that does not parse are rejected. Integral values come back
    as ``int`` so balances stay whole when deltas are whole.
    """
    if isinstance(raw, bool) or raw is None:
        raise InvalidInputError("amount required")
    try:
        if isinstance(raw, Real):
            value = float(raw)
        elif isinstance(raw, str) and raw.strip():
            value = float(raw.strip())
        else:
            raise InvalidInputError("amount required")
    except (ValueError, OverflowError):
        raise InvalidInputError("amount required") from None
    if not math.isfinite(value) or abs(value) > MAX_AMOUNT:
        raise InvalidInputError("amount required")
    return normalize_coins(value)


def add_coins(balance: Coins, delta: Coins) -> Coins:
    """Return ``balance + delta`` in double precision, as the durable column stores it."""
    return normalize_coins(float(balance) + float(delta))


def normalize_coins(value: Coins) -> Coins:
    """Collapse integral floats to ``int`` (``7.0`` -> ``7``)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
