# tests/conftest.py
import sys
import pytest
from decimal import Decimal
from pathlib import Path
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from bookstore.sa.models import Base, Book, Publisher, Purchase
from bookstore.sa.database import Database

@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_bookstore.db'}"

@pytest.fixture(scope="session")
def database(test_db_url):
    """Create a test database instance"""
    db = Database(test_db_url)

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete in reverse order of dependencies
    db_session.execute(text('DELETE FROM "Purchases"'))
    db_session.execute(text('DELETE FROM "Books"'))
    db_session.execute(text('DELETE FROM "Publishers"'))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def sample_publisher(db_session):
    """Create a sample publisher for testing."""
    publisher = Publisher(name="Ace")
    db_session.add(publisher)
    db_session.commit()
    return publisher

@pytest.fixture
def sample_book(db_session, sample_publisher):
    """Create a sample book for testing."""
    book = Book(
        title="Dune",
        author="Herbert",
        price=Decimal("12.50"),
        publisher=sample_publisher
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def sample_purchase(db_session, sample_book):
    """Create a sample purchase for testing."""
    purchase = Purchase(
        book=sample_book,
        user_name="Alice",
        user_address="1 Main St",
        credit_card_info="4111-1111-1111-1111"
    )
    db_session.add(purchase)
    db_session.commit()
    return purchase

@pytest.fixture
def count_rows(db_session):
    """Return a function counting the rows of a table"""
    def _count(table_name: str) -> int:
        return db_session.execute(text(f'SELECT COUNT(*) FROM "{table_name}"')).scalar()
    return _count
