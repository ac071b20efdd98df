"""Base repository implementation.

Provides common database operations and patterns for all repository classes.
Rows are soft-deleted: every query goes through ``_live_query`` so deleted
rows are never returned.
"""

from contextlib import contextmanager
from typing import TypeVar, Generic, List, Optional, Iterator
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from temfy.domain.exceptions import PersistenceError
from temfy.models import utcnow

logger = logging.getLogger(__name__)

# Generic type for model classes
ModelType = TypeVar('ModelType')


class BaseRepository(Generic[ModelType]):
    """Base repository class with common CRUD operations."""

    def __init__(self, db_session: Session, model_class: type):
        """Initialize repository with database session and model class.

        Args:
            db_session: SQLAlchemy database session
            model_class: SQLAlchemy model class with ``id`` and ``deleted_at`` columns
        """
        self.db = db_session
        self.model_class = model_class

    @property
    def _name(self) -> str:
        return self.model_class.__name__

    def _live_query(self):
        return self.db.query(self.model_class).filter(self.model_class.deleted_at.is_(None))

    def _integrity_error(self, exc: IntegrityError) -> Exception:
        """Map a constraint violation to a domain error. Subclasses refine this."""
        return PersistenceError(f"{self._name} violates a storage constraint")

    @contextmanager
    def _write(self, action: str) -> Iterator[None]:
        """Run a write, committing on success and rolling back on any failure.

        Args:
            action: Short description used in log and error messages

        Raises:
            PersistenceError: On connectivity or driver failures
        """
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to {action} {self._name}: {e}")
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action} {self._name}: {e}")
            raise PersistenceError(f"failed to {action} {self._name.lower()}") from e

    @contextmanager
    def _read(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action} {self._name}: {e}")
            raise PersistenceError(f"failed to {action} {self._name.lower()}") from e

    def add(self, instance: ModelType) -> ModelType:
        """Insert a new record.

        Args:
            instance: Transient model instance

        Returns:
            The persisted instance with its generated id

        Raises:
            PersistenceError: If the insert fails
        """
        with self._write("create"):
            self.db.add(instance)
            self.db.flush()
        self.db.refresh(instance)
        logger.info(f"Created {self._name} with id {instance.id}")
        return instance

    def find_by_id(self, id: int) -> Optional[ModelType]:
        """Get a live record by its ID.

        Args:
            id: Record ID

        Returns:
            Model instance if found, None otherwise
        """
        with self._read("load"):
            return self._live_query().filter(self.model_class.id == id).first()

    def find_one_by_filter(self, **filters) -> Optional[ModelType]:
        """Get a single live record by filter criteria.

        Args:
            **filters: Column equality filters

        Returns:
            Model instance if found, None otherwise
        """
        with self._read("load"):
            query = self._live_query()
            for field, value in filters.items():
                query = query.filter(getattr(self.model_class, field) == value)
            return query.first()

    def list_page(self, limit: int, offset: int) -> List[ModelType]:
        """Get live records with pagination, oldest first.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of model instances
        """
        with self._read("list"):
            return (
                self._live_query()
                .order_by(self.model_class.id)
                .offset(offset)
                .limit(limit)
                .all()
            )

    def apply(self, instance: ModelType, **changes) -> ModelType:
        """Write field changes to an already loaded record.

        Args:
            instance: Persistent model instance
            **changes: Fields to overwrite

        Returns:
            Refreshed model instance

        Raises:
            PersistenceError: If the update fails
        """
        with self._write("update"):
            for field, value in changes.items():
                setattr(instance, field, value)
            self.db.flush()
        self.db.refresh(instance)
        logger.info(f"Updated {self._name} with id {instance.id}")
        return instance

    def soft_delete(self, instance: ModelType) -> None:
        """Mark a record as deleted.

        Args:
            instance: Persistent model instance

        Raises:
            PersistenceError: If the update fails
        """
        with self._write("delete"):
            instance.deleted_at = utcnow()
        logger.info(f"Deleted {self._name} with id {instance.id}")
