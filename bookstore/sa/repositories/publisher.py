# bookstore/sa/repositories/publisher.py
from typing import Optional

from ..models import Publisher
from .base import BaseRepository

class PublisherRepository(BaseRepository):
    """Repository for managing Publisher entities."""

    def get_by_name(self, name: str) -> Optional[Publisher]:
        """Get a publisher by its exact name"""
        return self.session.query(Publisher).filter(Publisher.name == name).first()

    def get_or_create(self, name: str) -> Publisher:
        """Get the publisher with this name, or a new one that is saved with its first book.

        The new publisher is not added to the session here; it is inserted
        when a book referencing it is inserted.
        """
        publisher = self.get_by_name(name)
        if publisher is None:
            publisher = Publisher(name=name)
        return publisher

