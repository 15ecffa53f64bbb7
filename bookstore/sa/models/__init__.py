# bookstore/sa/models/__init__.py
from .base import Base, Money
from .publisher import Publisher
from .book import Book
from .purchase import Purchase

__all__ = [
    'Base',
    'Money',
    'Book',
    'Publisher',
    'Purchase'
]
