"""Database handle and dependency injection.

``Database`` owns the SQLAlchemy engine and session factory. One instance is
built by ``create_app`` and stored in ``app.extensions["database"]``; route
handlers receive a ready ``UserService`` through ``with_user_service``.
"""

from contextlib import contextmanager
from functools import wraps
from typing import Iterator
import logging

from flask import current_app
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from temfy.models import Base
from temfy.repositories import SQLAlchemyUserRepository
from temfy.services import UserService

logger = logging.getLogger(__name__)


def build_engine(database_url: str, pool_size: int = 10, max_open: int = 100, echo: bool = False) -> Engine:
    """Create an engine with pool settings suited to the database type.

    Args:
        database_url: SQLAlchemy URL
        pool_size: Connections kept open while idle
        max_open: Upper bound of concurrently open connections
        echo: Log SQL statements

    Returns:
        Configured SQLAlchemy engine
    """
    if database_url.startswith('sqlite'):
        connect_args = {"check_same_thread": False}
        if database_url in ('sqlite://', 'sqlite:///:memory:'):
            # a single shared connection keeps the in-memory schema alive
            return create_engine(
                database_url, connect_args=connect_args, poolclass=StaticPool, echo=echo
            )
        return create_engine(database_url, connect_args=connect_args, echo=echo)

    return create_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max(max_open - pool_size, 0),
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=echo,
    )


class Database:
    """Relational store handle: engine, session factory and schema helpers."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @classmethod
    def from_settings(cls, settings) -> 'Database':
        engine = build_engine(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_open=settings.DB_MAX_OPEN,
            echo=settings.DEBUG,
        )
        logger.info(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Get database session with automatic cleanup.

        Yields:
            SQLAlchemy database session
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def user_service(self, db: Session) -> UserService:
        """Wire a user service to a SQLAlchemy repository on ``db``."""
        return UserService(SQLAlchemyUserRepository(db))

    def create_all(self) -> None:
        """Create tables for every model."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    def ping(self) -> bool:
        """Return True if a trivial query succeeds."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()
        logger.info("Database connection closed")


def with_user_service(func):
    """Decorator to inject a request-scoped user service into route handlers.

    Usage:
        @bp.route('/users/<int:user_id>')
        @with_user_service
        def get_user(service: UserService, user_id: int):
            return jsonify(user_schema.dump(service.get_user_by_id(user_id)))
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        database: Database = current_app.extensions["database"]
        with database.session() as db:
            return func(database.user_service(db), *args, **kwargs)
    return wrapper
