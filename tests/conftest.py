import os
import sys

# Ensure repo root is on sys.path so tests can import the temfy package
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from temfy import close_connections, create_app
from temfy.models import Base
from temfy.repositories import InMemoryUserRepository
from temfy.services import UserService


@pytest.fixture
def app(tmp_path):
    # fresh SQLite file per test; Redis is never contacted
    db_file = tmp_path / "test_temfy.db"
    app = create_app({
        "TESTING": True,
        "DATABASE_URL": f"sqlite:///{db_file}",
        "REDIS_ENABLED": False,
        "LOG_LEVEL": "WARNING",
    })
    app.init_db()
    yield app
    close_connections(app)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def in_memory_session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def memory_repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(memory_repo):
    return UserService(memory_repo)
