from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any, Protocol

from ozone_coin.services._shared.dto import ClassGroup, Coins, Student
from ozone_coin.services._shared.errors import InvalidInputError, NotFoundError
from ozone_coin.services._shared.policies.common import (
    add_coins,
    clean_name,
    coerce_amount,
    new_id,
    normalize_id,
)


class ClassStore(Protocol):
    """
    Persistence port for classes and their students.

    Implementations return frozen read-models; callers can never mutate a
    stored record except through these operations.

    Error contract
    --------------
    - ``InvalidInputError`` for missing/malformed input (nothing written).
    - ``NotFoundError`` when the target id does not exist.
    - ``StoreError`` when the backend fails during a write.
    - Listing operations never raise on backend failure; they return ``[]``.
    """

    name: str

    def list_classes(self) -> list[ClassGroup]:
        """Return every class."""

    def create_class(self, name: Any) -> ClassGroup:
        """Create a class named ``name`` (trimmed)."""

    def delete_class(self, class_id: str) -> None:
        """Delete a class and, first, every student that belongs to it."""

    def list_students_by_class(self, class_id: str) -> list[Student]:
        """Return the students of a class, richest first."""

    def create_student(self, name: Any, class_id: Any) -> Student:
        """Create a student with zero coins in an existing class."""

    def delete_student(self, student_id: str) -> None:
        """Delete one student."""

    def apply_coins_delta(self, student_id: str, amount: Any) -> Student:
        """Atomically add ``amount`` (possibly negative) to a balance."""

    def ping(self) -> bool:
        """Return ``True`` when the backend answers."""


class InMemoryClassStore(ClassStore):
    """
    Process-local store used when no durable backend is configured.

    Both collections are insertion-ordered dicts. Every operation runs under
    one lock, so none can observe another's partial effect.

    .. note::
       Data lives as long as the process; each gunicorn worker has its own copy.
    """

    name = "memory"

    def __init__(self) -> None:
        self._classes: dict[str, ClassGroup] = {}
        self._students: dict[str, Student] = {}
        self._lock = threading.Lock()

    # ------------------------------ classes ------------------------------

    def list_classes(self) -> list[ClassGroup]:
        with self._lock:
            return list(self._classes.values())

    def create_class(self, name: Any) -> ClassGroup:
        group = ClassGroup(id=new_id(), name=clean_name(name))
        with self._lock:
            self._classes[group.id] = group
        return group

    def delete_class(self, class_id: str) -> None:
        key = normalize_id(class_id)
        with self._lock:
            if key is None or key not in self._classes:
                raise NotFoundError("Class", class_id)
            for sid in [s.id for s in self._students.values() if s.class_id == key]:
                del self._students[sid]
            del self._classes[key]

    # ------------------------------ students -----------------------------

    def list_students_by_class(self, class_id: str) -> list[Student]:
        key = normalize_id(class_id)
        if key is None:
            return []
        with self._lock:
            members = [s for s in self._students.values() if s.class_id == key]
        # sorted() is stable: equal balances keep insertion order
        return sorted(members, key=lambda s: s.coins, reverse=True)

    def create_student(self, name: Any, class_id: Any) -> Student:
        clean = clean_name(name, message="name and classId required")
        key = normalize_id(class_id)
        with self._lock:
            if key is None or key not in self._classes:
                raise InvalidInputError("Invalid classId")
            student = Student(id=new_id(), name=clean, coins=0, class_id=key)
            self._students[student.id] = student
        return student

    def delete_student(self, student_id: str) -> None:
        key = normalize_id(student_id)
        with self._lock:
            if key is None or self._students.pop(key, None) is None:
                raise NotFoundError("Student", student_id)

    def apply_coins_delta(self, student_id: str, amount: Any) -> Student:
        delta: Coins = coerce_amount(amount)
        key = normalize_id(student_id)
        with self._lock:
            current = self._students.get(key) if key is not None else None
            if current is None:
                raise NotFoundError("Student", student_id)
            updated = replace(current, coins=add_coins(current.coins, delta))
            self._students[updated.id] = updated
        return updated

    def ping(self) -> bool:
        return False
