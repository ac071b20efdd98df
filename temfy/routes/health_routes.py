"""Health check endpoints."""

import logging

from flask import Blueprint, current_app, jsonify

from temfy.utils.response import CODE_INTERNAL, error_response

bp = Blueprint("health", __name__)
logger = logging.getLogger(__name__)


@bp.route("/health")
def health():
    """Liveness probe."""
    return jsonify({
        "success": True,
        "message": "Server is running",
    })


@bp.route("/health/ready")
def ready():
    """Readiness probe: database reachable and, when enabled, Redis too."""
    database = current_app.extensions["database"]
    cache = current_app.extensions["cache"]

    checks = {"database": database.ping()}
    if cache.enabled:
        checks["cache"] = cache.ping()

    if not all(checks.values()):
        logger.warning(f"Readiness check failed: {checks}")
        return error_response(503, "Service not ready", CODE_INTERNAL, checks)

    return jsonify({
        "success": True,
        "message": "Service is ready",
        "checks": checks,
    })
