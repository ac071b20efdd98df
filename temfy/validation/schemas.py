"""Validation schemas for API requests using Marshmallow."""

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates
from typing import Any, List

from temfy.models import EMAIL_MAX_LENGTH


class CreateUserSchema(Schema):
    """Schema for validating user creation requests."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(
        required=True,
        validate=validate.Length(min=2, max=100),
        error_messages={'required': 'Name is required'}
    )

    email = fields.Email(
        required=True,
        validate=validate.Length(max=EMAIL_MAX_LENGTH),
        error_messages={'required': 'Email is required', 'invalid': 'Invalid email format'}
    )

    password = fields.Str(
        required=True,
        validate=validate.Length(min=6),
        error_messages={'required': 'Password is required'}
    )


class UpdateUserSchema(Schema):
    """Schema for validating user update requests.

    Password is optional; an empty value means "keep the current one".
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(
        required=True,
        validate=validate.Length(min=2, max=100),
        error_messages={'required': 'Name is required'}
    )

    email = fields.Email(
        required=True,
        validate=validate.Length(max=EMAIL_MAX_LENGTH),
        error_messages={'required': 'Email is required', 'invalid': 'Invalid email format'}
    )

    password = fields.Str(load_default=None, allow_none=True)

    @validates('password')
    def validate_password(self, value, **kwargs):
        if value and len(value) < 6:
            raise ValidationError('Shorter than minimum length 6.')


class UserSchema(Schema):
    """Outbound representation of a user. The password hash is never dumped."""

    id = fields.Int(dump_only=True)
    name = fields.Str()
    email = fields.Email()
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)


def describe_errors(messages: Any) -> str:
    """Flatten marshmallow error messages into one readable line."""
    if isinstance(messages, dict):
        parts: List[str] = []
        for field, errors in messages.items():
            if isinstance(errors, (list, tuple)):
                errors = ', '.join(str(e) for e in errors)
            elif isinstance(errors, dict):
                errors = describe_errors(errors)
            parts.append(f"{field}: {errors}")
        return '; '.join(parts)
    if isinstance(messages, (list, tuple)):
        return ', '.join(str(m) for m in messages)
    return str(messages)


# Schema instances for reuse
create_user_schema = CreateUserSchema()
update_user_schema = UpdateUserSchema()
user_schema = UserSchema()
users_schema = UserSchema(many=True)
