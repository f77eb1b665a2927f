"""
Configuration and helpers for the SQLAlchemy database session of the Book API.
Holds the engine, the session factory and the declarative base for the ORM models,
plus the FastAPI dependency that opens and closes one session per request.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from bookapi.core.config import settings

connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def enable_sqlite_foreign_keys(target_engine) -> None:
    """Turn on SQLite foreign key enforcement (ON DELETE CASCADE) for every new connection."""
    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if settings.is_sqlite:
    enable_sqlite_foreign_keys(engine)


def get_db():
    """
    Provides a database session for FastAPI dependencies.

    Yields:
        Session: SQLAlchemy session.

    Ensures:
        The session is closed after the request, whatever the outcome.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
