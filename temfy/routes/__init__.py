"""Flask blueprints for the HTTP API."""

from .health_routes import bp as health_bp
from .user_routes import bp as users_bp
from .errors import register_error_handlers

__all__ = ['health_bp', 'users_bp', 'register_error_handlers']
