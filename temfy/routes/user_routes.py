"""User CRUD endpoints.

Every handler decodes and validates the request, calls ``UserService`` and
maps the outcome onto a status code and the shared JSON envelope.
"""

import logging
from typing import Optional

from flask import Blueprint, request
from marshmallow import ValidationError

from temfy.database import with_user_service
from temfy.domain.entities import UserEntity
from temfy.domain.exceptions import ConflictError, NotFoundError, UserServiceError
from temfy.security.decorators import log_api_request
from temfy.services import UserService
from temfy.utils.response import (
    CODE_CONFLICT_OR_MISSING,
    CODE_GENERAL,
    CODE_INTERNAL,
    error_response,
    success_response,
)
from temfy.validation import (
    create_user_schema,
    describe_errors,
    update_user_schema,
    user_schema,
    users_schema,
)

bp = Blueprint("users", __name__)
logger = logging.getLogger(__name__)

MAX_USER_ID = 2 ** 32 - 1


def _parse_user_id(raw: str) -> Optional[int]:
    if not raw.isascii() or not raw.isdigit():
        return None
    user_id = int(raw)
    if user_id > MAX_USER_ID:
        return None
    return user_id


def _load_body(schema):
    """Decode the JSON body and validate it.

    Returns:
        Tuple of (validated data, None) or (None, error response)
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, error_response(400, "Invalid request body", CODE_GENERAL)

    try:
        return schema.load(data), None
    except ValidationError as err:
        logger.warning(
            f"Validation error from {request.remote_addr}: {err.messages}",
            extra={
                "endpoint": request.endpoint,
                "method": request.method,
                "validation_errors": err.messages
            }
        )
        return None, error_response(
            400,
            f"Validation failed: {describe_errors(err.messages)}",
            CODE_GENERAL,
            err.messages,
        )


def _service_error(err: UserServiceError, failure_message: str):
    if isinstance(err, NotFoundError):
        return error_response(404, "User not found", CODE_CONFLICT_OR_MISSING)
    if isinstance(err, ConflictError):
        return error_response(409, str(err), CODE_CONFLICT_OR_MISSING)
    logger.error(f"{failure_message}: {err}")
    return error_response(500, failure_message, CODE_INTERNAL)


@bp.route("", methods=["POST"], strict_slashes=False)
@log_api_request
@with_user_service
def create_user(service: UserService):
    """Create a new user."""
    payload, error = _load_body(create_user_schema)
    if error:
        return error

    user = UserEntity(name=payload["name"], email=payload["email"])
    try:
        created = service.create_user(user, payload["password"])
    except UserServiceError as err:
        return _service_error(err, "Failed to create user")

    return success_response(201, user_schema.dump(created))


@bp.route("", methods=["GET"], strict_slashes=False)
@log_api_request
@with_user_service
def list_users(service: UserService):
    """List users, paginated with ``limit`` and ``offset`` query parameters."""
    limit = request.args.get("limit", 10, type=int)
    offset = request.args.get("offset", 0, type=int)

    try:
        users = service.get_all_users(limit, offset)
    except UserServiceError as err:
        return _service_error(err, "Failed to get users")

    return success_response(200, users_schema.dump(users))


@bp.route("/<user_id>", methods=["GET"], strict_slashes=False)
@log_api_request
@with_user_service
def get_user(service: UserService, user_id: str):
    """Get user by ID."""
    uid = _parse_user_id(user_id)
    if uid is None:
        return error_response(400, "Invalid user ID", CODE_GENERAL)

    try:
        user = service.get_user_by_id(uid)
    except UserServiceError as err:
        return _service_error(err, "Failed to get user")

    return success_response(200, user_schema.dump(user))


@bp.route("/<user_id>", methods=["PUT"], strict_slashes=False)
@log_api_request
@with_user_service
def update_user(service: UserService, user_id: str):
    """Update name and email of a user; the password only when supplied."""
    uid = _parse_user_id(user_id)
    if uid is None:
        return error_response(400, "Invalid user ID", CODE_GENERAL)

    payload, error = _load_body(update_user_schema)
    if error:
        return error

    user = UserEntity(id=uid, name=payload["name"], email=payload["email"])
    try:
        updated = service.update_user(user, payload.get("password"))
    except UserServiceError as err:
        return _service_error(err, "Failed to update user")

    return success_response(200, user_schema.dump(updated))


@bp.route("/<user_id>", methods=["DELETE"], strict_slashes=False)
@log_api_request
@with_user_service
def delete_user(service: UserService, user_id: str):
    """Soft-delete a user."""
    uid = _parse_user_id(user_id)
    if uid is None:
        return error_response(400, "Invalid user ID", CODE_GENERAL)

    try:
        service.delete_user(uid)
    except UserServiceError as err:
        return _service_error(err, "Failed to delete user")

    return success_response(200, {
        "success": True,
        "message": "User deleted successfully",
    })
