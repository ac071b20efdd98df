"""JSON response helpers shared by every endpoint.

Errors use one envelope: ``{"success": false, "message", "code", "errors"?}``.
Codes are intentionally coarse and kept stable for existing clients.
"""

from typing import Any, Optional

from flask import jsonify

CODE_GENERAL = "0001"
CODE_CONFLICT_OR_MISSING = "0002"
CODE_INTERNAL = "0003"

CODE_LIST = {
    CODE_GENERAL: "General error",
}


def error_message(code: str) -> str:
    """Default message for an error code."""
    return CODE_LIST.get(code, "Something went wrong")


def error_body(message: str = "", code: str = "", errors: Optional[Any] = None) -> dict:
    """Build the error envelope, filling blank code and message with defaults."""
    code = code or CODE_GENERAL
    body = {
        "success": False,
        "message": message or error_message(code),
        "code": code,
    }
    if errors is not None:
        body["errors"] = errors
    return body


def success_response(status_code: int, data: Any):
    return jsonify(data), status_code


def error_response(status_code: int, message: str = "", code: str = "", errors: Optional[Any] = None):
    return jsonify(error_body(message, code, errors)), status_code
