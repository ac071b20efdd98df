"""In-memory user repository.

Drop-in replacement for the SQLAlchemy repository, used by the service
tests and anywhere a database is not wanted. Enforces the same live-email
uniqueness as the storage index.
"""

import threading
from dataclasses import replace
from typing import Dict, List

from temfy.domain.entities import UserEntity
from temfy.domain.exceptions import ConflictError, NotFoundError
from temfy.models import utcnow

from .interface import UserRepositoryInterface


class InMemoryUserRepository(UserRepositoryInterface):
    """Dict-backed repository keyed by user id."""

    def __init__(self):
        self._rows: Dict[int, UserEntity] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def _live(self) -> List[UserEntity]:
        return [row for _, row in sorted(self._rows.items()) if not row.is_deleted]

    def _load(self, user_id: int) -> UserEntity:
        row = self._rows.get(user_id)
        if row is None or row.is_deleted:
            raise NotFoundError()
        return row

    def _check_email_free(self, email: str, exclude_id=None) -> None:
        for row in self._live():
            if row.email == email and row.id != exclude_id:
                raise ConflictError()

    def create(self, user: UserEntity) -> UserEntity:
        with self._lock:
            self._check_email_free(user.email)
            now = utcnow()
            row = replace(
                user, id=self._next_id, created_at=now, updated_at=now, deleted_at=None
            )
            self._rows[row.id] = row
            self._next_id += 1
            return replace(row)

    def get_by_id(self, user_id: int) -> UserEntity:
        with self._lock:
            return replace(self._load(user_id))

    def get_by_email(self, email: str) -> UserEntity:
        with self._lock:
            for row in self._live():
                if row.email == email:
                    return replace(row)
        raise NotFoundError()

    def update(self, user: UserEntity) -> UserEntity:
        with self._lock:
            row = self._load(user.id)
            self._check_email_free(user.email, exclude_id=user.id)
            row.name = user.name
            row.email = user.email
            if user.password_hash is not None:
                row.password_hash = user.password_hash
            row.updated_at = utcnow()
            return replace(row)

    def delete(self, user_id: int) -> None:
        with self._lock:
            self._load(user_id).deleted_at = utcnow()

    def get_all(self, limit: int, offset: int) -> List[UserEntity]:
        with self._lock:
            return [replace(row) for row in self._live()[offset:offset + limit]]
