# bookstore/sa/models/book.py
from decimal import Decimal
from typing import List, TYPE_CHECKING
from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, Money

if TYPE_CHECKING:
    from .publisher import Publisher
    from .purchase import Purchase

class Book(Base):
    __tablename__ = 'Books'

    id: Mapped[int] = mapped_column('Id', Integer, primary_key=True)
    title: Mapped[str] = mapped_column('Title', String, nullable=False)
    author: Mapped[str] = mapped_column('Author', String, nullable=False)
    price: Mapped[Decimal] = mapped_column('Price', Money, nullable=False)
    publisher_id: Mapped[int] = mapped_column(
        'PublisherId',
        ForeignKey('Publishers.Id', name='FK_Books_Publishers'),
        nullable=False
    )

    # Relationships
    # No delete cascade: deleting a publisher nulls publisher_id, which NOT NULL rejects
    publisher: Mapped['Publisher'] = relationship('Publisher', back_populates='books')
    purchases: Mapped[List['Purchase']] = relationship('Purchase', back_populates='book')

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r} price={self.price}>"
