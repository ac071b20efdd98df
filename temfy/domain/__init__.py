"""Domain layer: the user entity and the error kinds shared by every layer."""

from .entities import UserEntity
from .exceptions import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    UserServiceError,
)

__all__ = [
    "UserEntity",
    "UserServiceError",
    "NotFoundError",
    "ConflictError",
    "PersistenceError",
]
