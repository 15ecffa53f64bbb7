# bookstore/sa/repositories/book.py
import logging
from datetime import datetime
from typing import Optional, List
from sqlalchemy.orm import joinedload

from bookstore.errors import BookNotFoundError
from ..models import Book, Purchase
from .base import BaseRepository

logger = logging.getLogger(__name__)

class BookRepository(BaseRepository):
    """Repository for managing Book entities."""

    def insert_book(self, book: Book) -> Book:
        """Insert a new book.

        A publisher that is not yet persisted is inserted along with the book.

        Args:
            book: The book to insert

        Returns:
            The inserted Book with its generated ID

        Raises:
            SaveError: If a required field is missing
        """
        self.session.add(book)
        self._commit("add book")
        logger.info("Added book %s (%s)", book.id, book.title)
        return book

    def update_book(self, book: Book) -> Book:
        """Save changes to an existing book.

        Args:
            book: The book to update, matched by ID. It may come from another session.

        Returns:
            The persistent Book holding the saved state

        Raises:
            BookNotFoundError: If no book exists with the given ID
            SaveError: If the new state violates a constraint
        """
        if book.id is None or self.session.get(Book, book.id) is None:
            raise BookNotFoundError(book.id)

        merged = self.session.merge(book)
        self._commit("update book")
        logger.info("Updated book %s", merged.id)
        return merged

    def get_book_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by its ID with the publisher loaded.

        Args:
            book_id: The ID of the book

        Returns:
            The Book if found, None otherwise
        """
        return (
            self.session.query(Book)
            .options(joinedload(Book.publisher))
            .filter(Book.id == book_id)
            .first()
        )

    def get_all_books(self) -> List[Book]:
        """Get every book with its publisher loaded. The order is not guaranteed."""
        return self.session.query(Book).options(joinedload(Book.publisher)).all()

    def buy_book(self, book: Book, user_name: str, user_address: str, credit_card_info: str) -> Purchase:
        """Record a purchase of a book, stamped with the current time.

        Args:
            book: The book being bought
            user_name: Name of the buyer
            user_address: Address of the buyer
            credit_card_info: Payment details, stored as given

        Returns:
            The persisted Purchase

        Raises:
            SaveError: If a buyer field is missing
        """
        purchase = Purchase(
            book=book,
            user_name=user_name,
            user_address=user_address,
            credit_card_info=credit_card_info,
            purchase_date=datetime.now()
        )
        self.session.add(purchase)
        self._commit("record purchase")
        logger.info("Recorded purchase %s of book %s", purchase.id, book.id)
        return purchase
