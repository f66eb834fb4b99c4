"""Tests for ClassGroupRecord and StudentRecord."""

from __future__ import annotations

import pytest
from ozone_coin.core.extensions import db
from ozone_coin.models import ClassGroupRecord, StudentRecord
from sqlalchemy.exc import IntegrityError

from tests.factories.roster import ClassGroupRecordFactory


class TestClassGroupRecord:
    def test_defaults_fill_id_and_timestamp(self, sql_store):
        record = ClassGroupRecord(name="5A")
        db.session.add(record)
        db.session.commit()

        assert len(record.id) == 32
        assert record.created_at is not None
        assert repr(record) == f"<ClassGroupRecord id={record.id}>"


class TestStudentRecord:
    def test_coins_default_to_zero(self, sql_store, factories):
        group = ClassGroupRecordFactory()
        student = StudentRecord(name="Ali", class_id=group.id)
        db.session.add(student)
        db.session.commit()

        assert student.coins == 0

    def test_empty_name_is_rejected(self, sql_store, factories):
        group = ClassGroupRecordFactory()
        db.session.add(StudentRecord(name="", class_id=group.id))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()

    def test_class_is_required(self, sql_store):
        db.session.add(StudentRecord(name="Ali", class_id=None))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()
