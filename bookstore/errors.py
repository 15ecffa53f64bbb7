# bookstore/errors.py

class BookstoreError(Exception):
    """Base class for errors reported to the operator"""
    pass

class SaveError(BookstoreError):
    """A change could not be written, e.g. a required field was missing"""
    pass

class BookNotFoundError(BookstoreError):
    """No book exists with the requested id"""

    def __init__(self, book_id):
        super().__init__(f"Book with ID {book_id} not found")
        self.book_id = book_id

class InvalidInput(BookstoreError, ValueError):
    """Operator input could not be parsed"""
    pass
