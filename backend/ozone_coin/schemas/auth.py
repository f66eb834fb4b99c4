"""Admin authentication Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields

from .common import InputSchema


class LoginSchema(InputSchema):
    """Input payload for ``POST /api/admin/login``.

    Nothing is validated here: any mismatch, including a missing or
    non-string field, is reported as invalid credentials by the admin gate.
    """

    user = fields.Raw(load_default=None, allow_none=True)
    password = fields.Raw(load_default=None, allow_none=True)


class LoginResponseSchema(Schema):
    """Response payload for a successful login."""

    ok = fields.Boolean(dump_default=True)
    token = fields.String(required=True)
