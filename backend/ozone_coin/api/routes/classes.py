"""Class endpoints, including the per-class student listing."""

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
from ozone_coin.schemas import ClassCreateSchema, ClassSchema, StudentSchema

bp = Blueprint("classes", __name__)

class_schema = ClassSchema()
class_list_schema = ClassSchema(many=True)
class_create_schema = ClassCreateSchema()
student_list_schema = StudentSchema(many=True)


@bp.get("")
@timing
def list_classes():
    """Return every class; an unreachable store yields ``[]``."""

    return json_response(class_list_schema.dump(get_store().list_classes()))


@bp.get("/<class_id>/students")
@timing
def list_class_students(class_id: str):
    """Return the students of a class ordered by coins, highest first."""

    with translated_errors():
        students = get_store().list_students_by_class(class_id)
    return json_response(student_list_schema.dump(students))


@bp.post("")
@require_admin
@timing
def create_class():
    """Create a class."""

    data = class_create_schema.load(json_body())
    with translated_errors():
        group = get_store().create_class(data["name"])
    return json_response(class_schema.dump(group))


@bp.delete("/<class_id>")
@require_admin
@timing
def delete_class(class_id: str):
    """Delete a class together with its students."""

    with translated_errors():
        get_store().delete_class(class_id)
    return json_response({"success": True})
