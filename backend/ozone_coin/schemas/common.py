"""Common Marshmallow schemas shared across resources."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema


class InputSchema(Schema):
    """Base for request bodies: unknown keys are dropped, not rejected."""

    class Meta:
        unknown = EXCLUDE


def messages(text: str) -> dict[str, str]:
    """Use one client-facing message for every way a field can be wrong."""

    return {"required": text, "null": text, "invalid": text}
