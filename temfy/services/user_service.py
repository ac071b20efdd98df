"""User service: business rules on top of the user repository."""

import logging
from typing import List, Optional

from temfy.domain.entities import UserEntity
from temfy.domain.exceptions import ConflictError, NotFoundError
from temfy.repositories.interface import UserRepositoryInterface
from temfy.security.passwords import hash_password

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
# LIMIT and OFFSET are bound as signed 64-bit integers by the database driver
MAX_PAGE_VALUE = 2 ** 63 - 1


class UserService:
    """Orchestrates user operations against any ``UserRepositoryInterface``.

    Errors raised by the repository propagate unchanged; the service only
    adds ``ConflictError`` for a taken email.
    """

    def __init__(self, user_repository: UserRepositoryInterface):
        self.user_repository = user_repository

    def create_user(self, user: UserEntity, password: str) -> UserEntity:
        """Create a user after checking the email is free.

        The check and the insert are separate calls; two concurrent creates
        with the same email can both pass the check, in which case the
        storage unique index rejects the second insert with ``ConflictError``.

        Args:
            user: Entity carrying name and email
            password: Plain-text password, hashed before storage

        Returns:
            The stored user with id and timestamps

        Raises:
            ConflictError: If a live user already has this email
        """
        try:
            self.user_repository.get_by_email(user.email)
        except NotFoundError:
            pass
        else:
            logger.info(f"Rejected create for existing email {user.email}")
            raise ConflictError("user with this email already exists")

        user.password_hash = hash_password(password)
        return self.user_repository.create(user)

    def get_user_by_id(self, user_id: int) -> UserEntity:
        return self.user_repository.get_by_id(user_id)

    def get_user_by_email(self, email: str) -> UserEntity:
        return self.user_repository.get_by_email(email)

    def update_user(self, user: UserEntity, password: Optional[str] = None) -> UserEntity:
        """Overwrite name and email of an existing user.

        The stored password is replaced only when ``password`` is given.
        Email uniqueness against other users is not pre-checked here.

        Raises:
            NotFoundError: If no live user has ``user.id``
        """
        self.user_repository.get_by_id(user.id)
        user.password_hash = hash_password(password) if password else None
        return self.user_repository.update(user)

    def delete_user(self, user_id: int) -> None:
        """Soft-delete an existing user.

        Raises:
            NotFoundError: If no live user has ``user_id``
        """
        self.user_repository.get_by_id(user_id)
        self.user_repository.delete(user_id)

    def get_all_users(self, limit: int, offset: int) -> List[UserEntity]:
        """List users, normalising a non-positive limit to 10 and a negative offset to 0.

        Values above ``MAX_PAGE_VALUE`` are saturated to it.
        """
        if limit <= 0:
            limit = DEFAULT_PAGE_SIZE
        if offset < 0:
            offset = 0
        limit = min(limit, MAX_PAGE_VALUE)
        offset = min(offset, MAX_PAGE_VALUE)
        return self.user_repository.get_all(limit, offset)
