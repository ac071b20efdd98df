"""Service layer implementations.

This module provides business logic services that orchestrate repository operations
and implement business rules.
"""

from .user_service import UserService

__all__ = [
    'UserService'
]
