"""Validation module for API input validation.

Provides Marshmallow schemas for the user endpoints.
"""

from .schemas import (
    CreateUserSchema, UpdateUserSchema, UserSchema,
    create_user_schema, update_user_schema,
    user_schema, users_schema,
    describe_errors,
)

__all__ = [
    'CreateUserSchema', 'UpdateUserSchema', 'UserSchema',
    'create_user_schema', 'update_user_schema',
    'user_schema', 'users_schema',
    'describe_errors',
]
