"""Application-wide error handlers.

Anything not handled inside a view still leaves as a JSON envelope.
"""

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from temfy.utils.response import CODE_INTERNAL, error_body

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return jsonify({
            "success": False,
            "message": err.description or err.name,
        }), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        logger.exception(f"Unhandled error: {err}")
        return jsonify(error_body("Internal server error", CODE_INTERNAL)), 500
