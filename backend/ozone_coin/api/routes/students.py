"""Student endpoints."""

from __future__ import annotations

from flask import Blueprint

from ozone_coin.api.deps import (
    get_store,
    json_body,
    json_response,
    require_admin,
    timing,
    translated_errors,
)
from ozone_coin.schemas import CoinsDeltaSchema, StudentCreateSchema, StudentSchema

bp = Blueprint("students", __name__)

student_schema = StudentSchema()
student_create_schema = StudentCreateSchema()
coins_delta_schema = CoinsDeltaSchema()


@bp.post("")
@require_admin
@timing
def create_student():
    """Add a student with zero coins to an existing class."""

    data = student_create_schema.load(json_body())
    with translated_errors():
        student = get_store().create_student(data["name"], data["class_id"])
    return json_response(student_schema.dump(student))


@bp.delete("/<student_id>")
@require_admin
@timing
def delete_student(student_id: str):
    """Remove a student."""

    with translated_errors():
        get_store().delete_student(student_id)
    return json_response({"success": True})


@bp.patch("/<student_id>/coins")
@require_admin
@timing
def change_coins(student_id: str):
    """Add ``amount`` (negative to deduct) to the student's balance."""

    data = coins_delta_schema.load(json_body())
    with translated_errors():
        student = get_store().apply_coins_delta(student_id, data["amount"])
    return json_response(student_schema.dump(student))
