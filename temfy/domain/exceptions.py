"""Error kinds raised by repositories and the user service.

Handlers are the only place these are turned into HTTP statuses.
"""


class UserServiceError(Exception):
    """Base class for user management failures."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(UserServiceError):
    """Requested user does not exist (or has been deleted)."""

    def __init__(self, message: str = "user not found"):
        super().__init__(message)


class ConflictError(UserServiceError):
    """Operation would violate email uniqueness."""

    def __init__(self, message: str = "user with this email already exists"):
        super().__init__(message)


class PersistenceError(UserServiceError):
    """Storage or connectivity failure."""
