"""Class and student Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields

from .common import InputSchema, messages


class ClassSchema(Schema):
    """Serialize a ``ClassGroup``."""

    id = fields.String(dump_only=True)
    name = fields.String(dump_only=True)


class ClassCreateSchema(InputSchema):
    """Validate ``POST /api/classes`` bodies. Blank names are rejected by the store."""

    name = fields.String(required=True, error_messages=messages("Name required"))


class StudentSchema(Schema):
    """Serialize a ``Student``; ``coins`` is passed through untouched (int or float)."""

    id = fields.String(dump_only=True)
    name = fields.String(dump_only=True)
    coins = fields.Raw(dump_only=True)
    class_id = fields.String(dump_only=True)


class StudentCreateSchema(InputSchema):
    """Validate ``POST /api/students`` bodies."""

    name = fields.String(required=True, error_messages=messages("name and classId required"))
    class_id = fields.String(
        required=True,
        data_key="classId",
        error_messages={
            "required": "name and classId required",
            "null": "name and classId required",
            "invalid": "Invalid classId",
        },
    )


class CoinsDeltaSchema(InputSchema):
    """Validate ``PATCH /api/students/<id>/coins`` bodies.

    Only presence is checked here; the store decides what counts as a number.
    """

    amount = fields.Raw(required=True, error_messages=messages("amount required"))
