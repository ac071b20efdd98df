"""Repository interface consumed by the user service.

Any backing store (SQLAlchemy, in-memory, ...) can be substituted as long
as it honours the error contract: lookups of a missing or deleted user
raise ``NotFoundError``, storage failures raise ``PersistenceError``.
"""

from abc import ABC, abstractmethod
from typing import List

from temfy.domain.entities import UserEntity


class UserRepositoryInterface(ABC):
    """Interface for User repository operations."""

    @abstractmethod
    def create(self, user: UserEntity) -> UserEntity:
        """Persist a new user, assigning id and timestamps."""
        pass

    @abstractmethod
    def get_by_id(self, user_id: int) -> UserEntity:
        """Get a live user by ID."""
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> UserEntity:
        """Get a live user by email."""
        pass

    @abstractmethod
    def update(self, user: UserEntity) -> UserEntity:
        """Overwrite name and email, and the password hash when one is set."""
        pass

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Soft-delete a user by ID."""
        pass

    @abstractmethod
    def get_all(self, limit: int, offset: int) -> List[UserEntity]:
        """Get one page of live users in insertion order."""
        pass
