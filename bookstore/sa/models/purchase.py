# bookstore/sa/models/purchase.py
from datetime import datetime
from typing import TYPE_CHECKING
from sqlalchemy import Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

if TYPE_CHECKING:
    from .book import Book

class Purchase(Base):
    __tablename__ = 'Purchases'

    id: Mapped[int] = mapped_column('Id', Integer, primary_key=True)
    book_id: Mapped[int] = mapped_column(
        'BookId',
        ForeignKey('Books.Id', name='FK_Purchases_Books'),
        nullable=False
    )
    user_name: Mapped[str] = mapped_column('UserName', String, nullable=False)
    user_address: Mapped[str] = mapped_column('UserAddress', String, nullable=False)
    # Stored as entered, no validation or encryption
    credit_card_info: Mapped[str] = mapped_column('CreditCardInfo', String, nullable=False)
    purchase_date: Mapped[datetime] = mapped_column(
        'PurchaseDate', DateTime(timezone=False), nullable=False, default=datetime.now
    )

    # Relationships
    book: Mapped['Book'] = relationship('Book', back_populates='purchases')

    def __repr__(self) -> str:
        return f"<Purchase id={self.id} book_id={self.book_id} user_name={self.user_name!r}>"
