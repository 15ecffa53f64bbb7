# bookstore/sa/repositories/__init__.py
from .book import BookRepository
from .publisher import PublisherRepository
from .purchase import PurchaseRepository

__all__ = ['BookRepository', 'PublisherRepository', 'PurchaseRepository']
