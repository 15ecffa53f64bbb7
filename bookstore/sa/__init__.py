# bookstore/sa/__init__.py
from .database import Database
from .models import Base, Book, Publisher, Purchase

__all__ = [
    'Database',
    'Base',
    'Book',
    'Publisher',
    'Purchase'
]
