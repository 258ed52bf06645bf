"""
Database session management (SQLAlchemy over the embedded SQLite file)
"""
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from creativityhub.config import Settings, get_settings
from creativityhub.infrastructure.container import database_path


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for all ORM models
    """
    pass


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine holding exactly one SQLite connection.

    The store is single-writer: every repository shares this connection,
    so the pool never hands out a second one.
    """
    engine = create_engine(
        url,
        echo=echo,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        # Foreign keys stay off: parent/child integrity is maintained in code
        cursor.execute("PRAGMA foreign_keys=OFF")
        cursor.close()

    return engine


def resolve_database_url(settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return f"sqlite:///{database_path(settings)}"


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)
