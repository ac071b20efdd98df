"""Repository pattern implementation.

This module provides data access layer abstractions following the Repository pattern
for clean separation of concerns and improved testability.
"""

from .base import BaseRepository
from .interface import UserRepositoryInterface
from .memory_repository import InMemoryUserRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    'BaseRepository',
    'UserRepositoryInterface',
    'SQLAlchemyUserRepository',
    'InMemoryUserRepository',
]
