"""Request decorators for API endpoints."""

import logging
import time
from functools import wraps
from typing import Callable

from flask import current_app, request

logger = logging.getLogger(__name__)


def _request_fields() -> dict:
    return {
        "method": request.method,
        "path": request.path,
        "endpoint": request.endpoint,
        "ip": request.remote_addr,
    }


def log_api_request(f: Callable) -> Callable:
    """Log one line when a user endpoint is entered and one when it returns.

    The exit line carries the response status and the handler duration in
    milliseconds. Server errors are logged at ERROR, everything else at INFO.
    Exceptions are logged with their traceback and re-raised for the app-wide
    error handler.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        fields = _request_fields()
        logger.info(f"API Request: {request.method} {request.path}", extra=fields)
        started = time.perf_counter()

        try:
            response = f(*args, **kwargs)
        except Exception as err:
            logger.error(
                f"API Error: {request.method} {request.path} - {err}",
                extra=dict(fields, error=str(err)),
                exc_info=True
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000
        status = current_app.make_response(response).status_code
        level = logging.ERROR if status >= 500 else logging.INFO
        logger.log(
            level,
            f"API Response: {request.method} {request.path} {status} {duration_ms:.1f}ms",
            extra=dict(fields, status=status, duration_ms=duration_ms),
        )
        return response

    return decorated_function
