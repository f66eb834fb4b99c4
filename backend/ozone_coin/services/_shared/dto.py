# comments in English; reST docstrings strict
from __future__ import annotations

from dataclasses import dataclass

Coins = int | float


@dataclass(frozen=True, slots=True)
class ClassGroup:
    """
    Read-model for a class (a named group of students).

    :param id: Opaque identifier assigned at creation.
    :type id: str
    :param name: Trimmed, non-empty display name.
    :type name: str
    """

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Student:
    """
    Read-model for a student and their coin balance.

    :param id: Opaque identifier assigned at creation.
    :type id: str
    :param name: Trimmed, non-empty display name.
    :type name: str
    :param coins: Current balance; may be negative.
    :type coins: int | float
    :param class_id: Identifier of the owning :class:`ClassGroup`.
    :type class_id: str
    """

    id: str
    name: str
    coins: Coins
    class_id: str
