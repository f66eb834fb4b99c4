# ozone_coin/infra/sqlalchemy/sqlalchemy_class_store.py
from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from typing import Any

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ozone_coin.models import ClassGroupRecord, StudentRecord
from ozone_coin.services._shared.dto import ClassGroup, Student
from ozone_coin.services._shared.errors import (
    InvalidInputError,
    NotFoundError,
    ServiceError,
    StoreError,
)
from ozone_coin.services._shared.policies.common import (
    clean_name,
    coerce_amount,
    new_id,
    normalize_coins,
    normalize_id,
)
from ozone_coin.services._shared.ports import ClassStore

log = logging.getLogger(__name__)


class SQLAlchemyClassStore(ClassStore):
    """
    Durable ``ClassStore`` backed by the Flask-SQLAlchemy session.

    The engine (and its connection pool) is created once by Flask-SQLAlchemy
    and shared by every request; nothing connects until the first operation,
    which also creates the schema if it is missing.

    .. note::
       ``delete_class`` issues two statements (students, then the class) in
       one session transaction. On databases without transactional DDL/DML
       guarantees a crash between them may still leave orphaned students.
    """

    name = "sqlalchemy"

    def __init__(self, database: SQLAlchemy) -> None:
        self.db = database
        self._schema_ready = False
        self._schema_lock = threading.Lock()

    @property
    def session(self) -> Session:
        return self.db.session

    # ------------------------- helpers -------------------------

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        with self._schema_lock:
            if not self._schema_ready:
                self.db.create_all()
                self._schema_ready = True

    def _rollback(self) -> None:
        with suppress(SQLAlchemyError):
            self.session.rollback()

    @contextmanager
    def _write(self, failure_message: str) -> Iterator[Session]:
        """Run a write inside one transaction; backend errors become ``StoreError``."""
        try:
            self._ensure_schema()
            yield self.session
            self.session.commit()
        except ServiceError:
            self._rollback()
            raise
        except SQLAlchemyError as exc:
            self._rollback()
            log.exception("store.write_failed: %s", failure_message)
            raise StoreError(failure_message, cause=str(exc)) from exc

    @staticmethod
    def _to_student(row: Any) -> Student:
        return Student(
            id=row.id,
            name=row.name,
            coins=normalize_coins(row.coins),
            class_id=row.class_id,
        )

    # ------------------------------ classes ------------------------------

    def list_classes(self) -> list[ClassGroup]:
        stmt = select(ClassGroupRecord.id, ClassGroupRecord.name).order_by(
            ClassGroupRecord.created_at.asc(), ClassGroupRecord.id.asc()
        )
        try:
            self._ensure_schema()
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError:
            self._rollback()
            log.exception("store.list_classes_failed")
            return []
        return [ClassGroup(id=row.id, name=row.name) for row in rows]

    def create_class(self, name: Any) -> ClassGroup:
        clean = clean_name(name)
        class_id = new_id()
        with self._write("Failed to create class") as session:
            session.add(ClassGroupRecord(id=class_id, name=clean))
        return ClassGroup(id=class_id, name=clean)

    def delete_class(self, class_id: str) -> None:
        key = normalize_id(class_id)
        if key is None:
            raise NotFoundError("Class", class_id)
        with self._write("Failed to delete class") as session:
            session.execute(
                delete(StudentRecord)
                .where(StudentRecord.class_id == key)
                .execution_options(synchronize_session=False)
            )
            result = session.execute(
                delete(ClassGroupRecord)
                .where(ClassGroupRecord.id == key)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Class", class_id)

    # ------------------------------ students -----------------------------

    def list_students_by_class(self, class_id: str) -> list[Student]:
        key = normalize_id(class_id)
        if key is None:
            raise InvalidInputError("Invalid class id")
        stmt = (
            select(StudentRecord.id, StudentRecord.name, StudentRecord.coins, StudentRecord.class_id)
            .where(StudentRecord.class_id == key)
            .order_by(
                StudentRecord.coins.desc(),
                StudentRecord.created_at.asc(),
                StudentRecord.id.asc(),
            )
        )
        try:
            self._ensure_schema()
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError:
            self._rollback()
            log.exception("store.list_students_failed", extra={"class_id": key})
            return []
        return [self._to_student(row) for row in rows]

    def create_student(self, name: Any, class_id: Any) -> Student:
        clean = clean_name(name, message="name and classId required")
        key = normalize_id(class_id)
        if key is None:
            raise InvalidInputError("Invalid classId")
        student_id = new_id()
        with self._write("Failed to add student") as session:
            if session.get(ClassGroupRecord, key) is None:
                raise InvalidInputError("Invalid classId")
            session.add(StudentRecord(id=student_id, name=clean, coins=0, class_id=key))
        return Student(id=student_id, name=clean, coins=0, class_id=key)

    def delete_student(self, student_id: str) -> None:
        key = normalize_id(student_id)
        if key is None:
            raise NotFoundError("Student", student_id)
        with self._write("Failed to delete student") as session:
            result = session.execute(
                delete(StudentRecord)
                .where(StudentRecord.id == key)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Student", student_id)

    def apply_coins_delta(self, student_id: str, amount: Any) -> Student:
        delta = coerce_amount(amount)
        key = normalize_id(student_id)
        if key is None:
            raise NotFoundError("Student", student_id)
        # Single increment-and-fetch statement; no read-modify-write
        stmt = (
            update(StudentRecord)
            .where(StudentRecord.id == key)
            .values(coins=StudentRecord.coins + float(delta))
            .returning(
                StudentRecord.id,
                StudentRecord.name,
                StudentRecord.coins,
                StudentRecord.class_id,
            )
            .execution_options(synchronize_session=False)
        )
        with self._write("Failed to update coins") as session:
            row = session.execute(stmt).first()
            if row is None:
                raise NotFoundError("Student", student_id)
            student = self._to_student(row)
        return student

    def ping(self) -> bool:
        try:
            self.session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            self._rollback()
            log.warning("store.ping_failed", exc_info=True)
            return False
        return True
