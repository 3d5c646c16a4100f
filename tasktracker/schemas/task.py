"""Task-related Marshmallow schemas."""

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validates_schema

from tasktracker.extensions import ma


def _not_blank(value: str) -> None:
    if not value.strip():
        raise ValidationError("Description must not be empty.")


class TaskSchema(ma.Schema):
    """Schema for task serialization."""

    id = fields.Int(dump_only=True)
    description = fields.Str(required=True)
    completed = fields.Bool()
    created_at = fields.DateTime(dump_only=True, format="iso")
    updated_at = fields.DateTime(dump_only=True, format="iso")


class TaskCreateSchema(Schema):
    """Schema for task creation validation."""

    class Meta:
        unknown = EXCLUDE

    description = fields.Str(
        required=True,
        validate=_not_blank,
        error_messages={"required": "Description is required.", "null": "Description is required."},
    )


class TaskUpdateSchema(Schema):
    """Schema for partial task updates."""

    class Meta:
        unknown = EXCLUDE

    description = fields.Str(validate=_not_blank)
    completed = fields.Bool()

    @validates_schema
    def require_a_field(self, data, **kwargs):
        if not data:
            raise ValidationError("At least one of description or completed must be provided.")
