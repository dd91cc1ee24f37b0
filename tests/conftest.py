"""
pytest Fixtures for Book Rental API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# Settings are cached on first use.
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-key-for-unit-tests"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rental_api.database import Base, get_db
from rental_api.dependencies import get_content_store
from rental_api.main import app
from rental_api.models import Book, Rental, User
from rental_api.services import ContentStore
from rental_api.services.security import hash_password

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps tests fast and free of external services.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the entire session.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection inside an outer transaction that
    is rolled back afterwards, so commits made by the services never leak
    between tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def content_store(tmp_path) -> ContentStore:
    """A content store writing under the test's temporary directory."""
    return ContentStore(tmp_path / "uploads")


@pytest.fixture(scope="function")
def client(
    db_session: Session, content_store: ContentStore
) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database and upload directory.

    We override get_db to use our test session and get_content_store to
    keep uploads inside tmp_path.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_content_store] = lambda: content_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a sample user with password 'secret123'."""
    user = User(
        name="Test User",
        email="testuser@example.com",
        hashed_password=hash_password("secret123"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(
        title="Dune",
        author="Frank Herbert",
        genre="SciFi",
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """
    Create 15 books for pagination testing.

    Every third book (5 in total) is Fantasy; the rest are Mystery.
    """
    books = []
    for i in range(15):
        book = Book(
            title=f"Test Book {i + 1}",
            author=f"Author {i + 1}",
            genre="Fantasy" if i % 3 == 0 else "Mystery",
        )
        books.append(book)
        db_session.add(book)
        # Flush one at a time so created_at follows insertion order
        db_session.flush()

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books


@pytest.fixture
def active_rental(db_session: Session, sample_book: Book) -> Rental:
    """Create an unreturned rental of the sample book by user 'u1'."""
    rental = Rental(user_id="u1", book_id=sample_book.id)
    db_session.add(rental)
    db_session.commit()
    db_session.refresh(rental)
    return rental
