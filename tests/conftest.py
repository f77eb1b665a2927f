# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bookapi.db.session import Base, get_db, enable_sqlite_foreign_keys
# Import all models to ensure they are registered with Base
from bookapi.models import Author, Book, User  # noqa: F401
from bookapi.core.cache import TagAwareCache
from bookapi.core.security import ROLE_ADMIN, ROLE_USER
from bookapi.crud import create_user
from bookapi.schemas.user import UserCreate
from bookapi.api.deps import get_cache
from bookapi.api.main import app

# --- Test Database Setup ---
# In-memory SQLite shared by every thread (TestClient runs sync routes in a thread pool)
TEST_DATABASE_URL = "sqlite:///:memory:"

ADMIN_AUTH = ("admin@bookapi.com", "password")
USER_AUTH = ("user@bookapi.com", "password")


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="session")
def db_session_factory(db_engine):
    """Returns a SQLAlchemy session factory."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db_session(db_engine, db_session_factory):
    """Provides a transactional scope around a test function."""
    connection = db_engine.connect()
    transaction = connection.begin()
    session = db_session_factory(bind=connection)

    try:
        yield session
    finally:
        session.close()
        if transaction.is_active:
            transaction.rollback()
        connection.close()


@pytest.fixture
def cache():
    return TagAwareCache(maxsize=128, ttl=60)


@pytest.fixture
def client(db_session, cache):
    """TestClient wired to the test session and a fresh cache."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: cache
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# --- Data Fixtures ---
@pytest.fixture
def admin_user(db_session):
    return create_user(db_session, UserCreate(email=ADMIN_AUTH[0], password=ADMIN_AUTH[1], roles=[ROLE_ADMIN]))


@pytest.fixture
def regular_user(db_session):
    return create_user(db_session, UserCreate(email=USER_AUTH[0], password=USER_AUTH[1], roles=[ROLE_USER]))


@pytest.fixture
def make_author(db_session):
    def _make(first_name="Virginia", last_name="Woolf"):
        author = Author(first_name=first_name, last_name=last_name)
        db_session.add(author)
        db_session.commit()
        db_session.refresh(author)
        return author
    return _make


@pytest.fixture
def make_books(db_session):
    def _make(count, author=None):
        books = [Book(title=f"Titre {i}", cover_text=f"Quatrième de couverture numéro : {i}", author=author)
                 for i in range(count)]
        db_session.add_all(books)
        db_session.commit()
        for book in books:
            db_session.refresh(book)
        return books
    return _make
