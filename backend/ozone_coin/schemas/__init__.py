"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginResponseSchema, LoginSchema
from .roster import (
    ClassCreateSchema,
    ClassSchema,
    CoinsDeltaSchema,
    StudentCreateSchema,
    StudentSchema,
)

__all__ = [
    "LoginSchema",
    "LoginResponseSchema",
    "ClassSchema",
    "ClassCreateSchema",
    "StudentSchema",
    "StudentCreateSchema",
    "CoinsDeltaSchema",
]
