"""Domain entities representing core business objects."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class UserEntity:
    """User account as seen by the service and handler layers.

    ``id`` and the timestamps are assigned by the repository on create.
    ``password_hash`` is ``None`` on an update request that leaves the
    stored password alone.
    """

    name: str
    email: str
    password_hash: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
