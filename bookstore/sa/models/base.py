# bookstore/sa/models/base.py
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy import Numeric, String
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator

class Base(DeclarativeBase):
    """Base class for all models"""
    pass

class Money(TypeDecorator):
    """Fixed-point decimal(18, 2) that never passes through a float.

    SQLite has no decimal type and SQLAlchemy would store Numeric as REAL,
    which loses digits beyond about 15 significant places. On SQLite the value
    is stored as its exact text instead.
    """
    impl = Numeric(18, 2)
    cache_ok = True

    QUANTUM = Decimal("0.01")

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(32))
        return dialect.type_descriptor(self.impl)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = Decimal(value).quantize(self.QUANTUM, rounding=ROUND_HALF_UP)
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(str(value)).quantize(self.QUANTUM, rounding=ROUND_HALF_UP)
