# bookstore/sa/repositories/purchase.py
import logging
from typing import List
from sqlalchemy.orm import joinedload

from ..models import Purchase
from .base import BaseRepository

logger = logging.getLogger(__name__)

class PurchaseRepository(BaseRepository):
    """Repository for managing Purchase entities."""

    def get_all_purchases(self) -> List[Purchase]:
        """Get every purchase with its book loaded. The order is not guaranteed."""
        return self.session.query(Purchase).options(joinedload(Purchase.book)).all()

    def insert_purchase(self, purchase: Purchase) -> Purchase:
        """Insert a purchase.

        Args:
            purchase: The purchase to insert

        Returns:
            The inserted Purchase with its generated ID

        Raises:
            SaveError: If a required field or the book reference is missing
        """
        self.session.add(purchase)
        self._commit("record purchase")
        logger.info("Recorded purchase %s", purchase.id)
        return purchase
