# tests/test_repositories/test_book_repository.py
import pytest
from datetime import datetime
from decimal import Decimal
from bookstore.errors import BookNotFoundError, SaveError
from bookstore.sa.models import Book, Publisher, Purchase
from bookstore.sa.repositories import BookRepository

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance"""
    return BookRepository(db_session)

def make_book(title="Dune", author="Herbert", price="12.50", publisher="Ace"):
    return Book(
        title=title,
        author=author,
        price=Decimal(price),
        publisher=Publisher(name=publisher)
    )

def test_insert_book_with_new_publisher(book_repo, count_rows):
    """Test that inserting a book with a new publisher creates one row of each"""
    book = book_repo.insert_book(make_book())

    assert book.id is not None
    assert book.publisher.id is not None
    assert book.publisher_id == book.publisher.id
    assert count_rows("Books") == 1
    assert count_rows("Publishers") == 1

def test_insert_book_with_existing_publisher(book_repo, sample_publisher, count_rows):
    """Test that a book can reference an already saved publisher"""
    book = Book(title="Hyperion", author="Simmons", price=Decimal("9.99"), publisher=sample_publisher)
    book_repo.insert_book(book)

    assert book.publisher_id == sample_publisher.id
    assert count_rows("Publishers") == 1

def test_get_book_by_id(book_repo, database):
    """Test that a fetched book matches the inserted one and has its publisher loaded"""
    inserted = book_repo.insert_book(make_book())

    # Use a separate session so nothing comes from the identity map
    session = database.get_session()
    try:
        fetched = BookRepository(session).get_book_by_id(inserted.id)
    finally:
        session.close()

    assert fetched is not None
    assert fetched.id == inserted.id
    assert fetched.title == "Dune"
    assert fetched.author == "Herbert"
    assert fetched.price == Decimal("12.50")
    assert fetched.publisher_id == inserted.publisher_id
    # Loaded eagerly, so still available after the session closed
    assert fetched.publisher.name == "Ace"

def test_get_by_nonexistent_id(book_repo):
    """Test fetching a book with a non-existent ID"""
    assert book_repo.get_book_by_id(9999) is None

def test_get_all_books(book_repo, database):
    """Test that every inserted book is returned with its publisher"""
    book_repo.insert_book(make_book())
    book_repo.insert_book(make_book(title="Neuromancer", author="Gibson", price="8.00", publisher="Ace"))
    book_repo.insert_book(make_book(title="Emma", author="Austen", price="5.25", publisher="Penguin"))

    session = database.get_session()
    try:
        books = BookRepository(session).get_all_books()
    finally:
        session.close()

    assert len(books) == 3
    # Order is not guaranteed
    assert {b.title for b in books} == {"Dune", "Neuromancer", "Emma"}
    assert {b.publisher.name for b in books} == {"Ace", "Penguin"}

def test_get_all_books_empty(book_repo):
    """Test listing books on an empty database"""
    assert book_repo.get_all_books() == []

def test_insert_book_missing_title(book_repo, count_rows):
    """Test that a missing required field fails at commit and the session stays usable"""
    with pytest.raises(SaveError):
        book_repo.insert_book(make_book(title=None))

    assert count_rows("Books") == 0
    assert count_rows("Publishers") == 0

    book_repo.insert_book(make_book())
    assert count_rows("Books") == 1

def test_insert_book_missing_publisher_name(book_repo, count_rows):
    """Test that a publisher without a name is rejected"""
    with pytest.raises(SaveError):
        book_repo.insert_book(make_book(publisher=None))
    assert count_rows("Books") == 0

def test_update_book(book_repo, db_session, sample_book):
    """Test updating an existing book"""
    sample_book.title = "Dune Messiah"
    sample_book.price = Decimal("14.00")
    updated = book_repo.update_book(sample_book)

    assert updated.id == sample_book.id
    db_session.expire_all()
    reloaded = book_repo.get_book_by_id(sample_book.id)
    assert reloaded.title == "Dune Messiah"
    assert reloaded.price == Decimal("14.00")

def test_update_book_from_detached_instance(book_repo, database, sample_book):
    """Test that a book edited outside the repository's session is saved"""
    other = database.get_session()
    try:
        detached = other.get(Book, sample_book.id)
        other.expunge(detached)
    finally:
        other.close()

    detached.author = "Frank Herbert"
    book_repo.update_book(detached)

    assert book_repo.get_book_by_id(sample_book.id).author == "Frank Herbert"

def test_update_nonexistent_book(book_repo, sample_publisher, count_rows):
    """Test that updating an unknown ID is reported, not ignored"""
    ghost = Book(id=9999, title="Ghost", author="Nobody", price=Decimal("1.00"),
                 publisher_id=sample_publisher.id)
    with pytest.raises(BookNotFoundError) as excinfo:
        book_repo.update_book(ghost)

    assert excinfo.value.book_id == 9999
    assert count_rows("Books") == 0

def test_update_book_without_id(book_repo):
    """Test that a book that was never saved cannot be updated"""
    with pytest.raises(BookNotFoundError):
        book_repo.update_book(make_book())

def test_buy_book(book_repo, db_session, sample_book, count_rows):
    """Test that buying a book records exactly one purchase stamped with the current time"""
    before = datetime.now()
    purchase = book_repo.buy_book(sample_book, "Alice", "1 Main St", "4111-1111-1111-1111")
    after = datetime.now()

    assert count_rows("Purchases") == 1
    assert purchase.id is not None
    assert purchase.book_id == sample_book.id
    assert purchase.user_name == "Alice"
    assert purchase.user_address == "1 Main St"
    assert purchase.credit_card_info == "4111-1111-1111-1111"
    assert before <= purchase.purchase_date <= after

def test_buy_book_uses_given_buyer_details(book_repo, sample_book):
    """Test that the buyer details come from the arguments only"""
    purchase = book_repo.buy_book(sample_book, "Bob", "2 Side St", "5500-0000-0000-0004")
    stored = book_repo.session.get(Purchase, purchase.id)
    assert (stored.user_name, stored.user_address, stored.credit_card_info) == (
        "Bob", "2 Side St", "5500-0000-0000-0004"
    )

def test_buy_book_missing_buyer_name(book_repo, sample_book, count_rows):
    """Test that a purchase without a buyer name is rejected"""
    with pytest.raises(SaveError):
        book_repo.buy_book(sample_book, None, "1 Main St", "4111")
    assert count_rows("Purchases") == 0
