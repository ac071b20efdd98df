"""User repository implementation.

Handles all database operations for the User model and maps rows to
``UserEntity`` objects so nothing above this layer touches the ORM.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from temfy.domain.entities import UserEntity
from temfy.domain.exceptions import ConflictError, NotFoundError, PersistenceError
from temfy.models import User

from .base import BaseRepository
from .interface import UserRepositoryInterface

logger = logging.getLogger(__name__)


def _to_entity(row: User) -> UserEntity:
    return UserEntity(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.hashed_password,
        created_at=row.created_at,
        updated_at=row.updated_at,
        deleted_at=row.deleted_at,
    )


class SQLAlchemyUserRepository(BaseRepository[User], UserRepositoryInterface):
    """SQLAlchemy-backed user repository."""

    def __init__(self, db_session: Session):
        """Initialize user repository.

        Args:
            db_session: SQLAlchemy database session
        """
        super().__init__(db_session, User)

    def _integrity_error(self, exc: IntegrityError) -> Exception:
        if "email" in str(exc.orig or exc).lower():
            return ConflictError()
        return PersistenceError("user violates a storage constraint")

    def _load(self, user_id: int) -> User:
        row = self.find_by_id(user_id)
        if row is None:
            raise NotFoundError()
        return row

    def create(self, user: UserEntity) -> UserEntity:
        row = self.add(
            User(
                name=user.name,
                email=user.email,
                hashed_password=user.password_hash,
            )
        )
        return _to_entity(row)

    def get_by_id(self, user_id: int) -> UserEntity:
        return _to_entity(self._load(user_id))

    def get_by_email(self, email: str) -> UserEntity:
        row = self.find_one_by_filter(email=email)
        if row is None:
            raise NotFoundError()
        return _to_entity(row)

    def update(self, user: UserEntity) -> UserEntity:
        row = self._load(user.id)
        changes = {"name": user.name, "email": user.email}
        if user.password_hash is not None:
            changes["hashed_password"] = user.password_hash
        return _to_entity(self.apply(row, **changes))

    def delete(self, user_id: int) -> None:
        self.soft_delete(self._load(user_id))

    def get_all(self, limit: int, offset: int) -> List[UserEntity]:
        return [_to_entity(row) for row in self.list_page(limit, offset)]
