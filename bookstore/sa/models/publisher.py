# bookstore/sa/models/publisher.py
from typing import List, TYPE_CHECKING
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

if TYPE_CHECKING:
    from .book import Book

class Publisher(Base):
    __tablename__ = 'Publishers'

    id: Mapped[int] = mapped_column('Id', Integer, primary_key=True)
    name: Mapped[str] = mapped_column('Name', String, nullable=False)

    # Relationships
    books: Mapped[List['Book']] = relationship('Book', back_populates='publisher')

    def __repr__(self) -> str:
        return f"<Publisher id={self.id} name={self.name!r}>"
