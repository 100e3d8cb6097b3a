import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_books.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["API_KEY"] = "test-api-key"
os.environ["OPENLIBRARY_API_URL"] = "https://registry.test/api/books"
os.environ["MESSAGES_LOCALE"] = "en"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from app.main import app
from app.db.models.author import Author as AuthorModel
from app.db.models.book import Book as BookModel

API_KEY_HEADERS = {"api-key": "test-api-key"}


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        try:
            if os.path.exists(test_db_path):
                os.remove(test_db_path)
            if os.path.exists(temp_db_dir):
                os.rmdir(temp_db_dir)
        except OSError as e:
            print(f"Cleanup failed: {e}")


def _override_get_db(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    return override_get_db


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client sending the api key, with database dependency override."""
    from app.api.deps import get_db

    app.dependency_overrides[get_db] = _override_get_db(db_session)

    yield TestClient(app, headers=API_KEY_HEADERS)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def anonymous_client(db_session):
    """Test client that sends no api key."""
    from app.api.deps import get_db

    app.dependency_overrides[get_db] = _override_get_db(db_session)

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def author(db: Session) -> AuthorModel:
    """Create an author with a large audience."""
    author = AuthorModel(name="Stephen King", age=76, followers_number=1500)
    db.add(author)
    db.commit()
    db.refresh(author)
    return author


@pytest.fixture(scope="function")
def other_author(db: Session) -> AuthorModel:
    """Create a second author with a small audience."""
    author = AuthorModel(name="Shirley Jackson", age=48, followers_number=75)
    db.add(author)
    db.commit()
    db.refresh(author)
    return author


@pytest.fixture(scope="function")
def book(db: Session, author: AuthorModel) -> BookModel:
    """Create a book for the default author."""
    from datetime import date

    book = BookModel(
        title="The Shining",
        author_id=author.id,
        publication_date=date(1977, 1, 28),
        type="Horror",
    )
    db.add(book)
    db.commit()
    db.refresh(book)
    return book
