"""CORS and security header configuration applied to every response."""

from typing import List

from flask import Flask, request

CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE']
CORS_HEADERS = ['Origin', 'Content-Type', 'Accept']


def _allowed_origin(origins: List[str]) -> str:
    if not origins or '*' in origins:
        return '*'
    origin = request.headers.get('Origin')
    if origin in origins:
        return origin
    return ''


def init_security(app: Flask, cors_origins: List[str]) -> None:
    """Register the response hook that adds CORS and hardening headers.

    Args:
        app: Flask application instance
        cors_origins: Allowed origins; ``*`` allows any
    """

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'

        allowed = _allowed_origin(cors_origins)
        if allowed:
            response.headers['Access-Control-Allow-Origin'] = allowed
            response.headers['Access-Control-Allow-Methods'] = ','.join(CORS_METHODS)
            response.headers['Access-Control-Allow-Headers'] = ','.join(CORS_HEADERS)
            if allowed != '*':
                response.headers['Vary'] = 'Origin'
        return response
