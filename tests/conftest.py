"""
Pytest fixtures for testing
"""
import pytest
from sqlalchemy.orm import Session

from creativityhub.application.database_manager import DatabaseManager
from creativityhub.config import Settings
from creativityhub.infrastructure.db.session import create_db_engine, create_session_factory
from creativityhub.infrastructure.db.migrator import MigrationRunner

MEMORY_URL = "sqlite:///:memory:"


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(DATA_DIR=str(tmp_path), DATABASE_URL=MEMORY_URL, _env_file=None)


@pytest.fixture
def db_engine():
    """In-memory SQLite engine holding one shared connection"""
    engine = create_db_engine(MEMORY_URL)
    yield engine
    engine.dispose()


@pytest.fixture
def raw_session(db_engine) -> Session:
    """Session on an empty store (no migrations applied)"""
    session = create_session_factory(db_engine)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def db_session(raw_session) -> Session:
    """Session on a store migrated to the latest schema"""
    result = MigrationRunner(raw_session).migrate_to_latest()
    result.raise_for_status()
    return raw_session


@pytest.fixture
def manager(test_settings):
    """Bootstrapped DatabaseManager over a private in-memory store"""
    mgr = DatabaseManager(settings=test_settings)
    mgr.bootstrap().raise_for_status()
    yield mgr
    mgr.close()
