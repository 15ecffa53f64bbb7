# bookstore/parsing.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .errors import InvalidInput

PRICE_QUANTUM = Decimal("0.01")

# Numeric(18, 2) leaves 16 digits before the decimal point
MAX_PRICE = Decimal("9999999999999999.99")

# Largest value of a 32-bit INT primary key
MAX_BOOK_ID = 2**31 - 1

def parse_price(text: str) -> Decimal:
    """Parse a price entered by the operator.

    The value is rounded half-up to two fractional digits, the same precision
    the Price column stores.

    Raises:
        InvalidInput: If the text is not a finite, non-negative number
    """
    cleaned = (text or "").strip().lstrip("$").replace(",", "")
    try:
        price = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidInput(f"'{text}' is not a valid price")

    if not price.is_finite():
        raise InvalidInput(f"'{text}' is not a valid price")
    if price < 0:
        raise InvalidInput("Price cannot be negative")

    if price > MAX_PRICE:
        raise InvalidInput(f"Price cannot exceed {MAX_PRICE}")
    price = price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if price > MAX_PRICE:
        raise InvalidInput(f"Price cannot exceed {MAX_PRICE}")
    return price

def parse_book_id(text: str) -> int:
    """Parse a book ID entered by the operator"""
    try:
        book_id = int((text or "").strip())
    except ValueError:
        raise InvalidInput(f"'{text}' is not a valid book ID")
    if book_id < 1:
        raise InvalidInput("Book ID must be a positive number")
    if book_id > MAX_BOOK_ID:
        raise InvalidInput(f"Book ID cannot exceed {MAX_BOOK_ID}")
    return book_id

def parse_required_text(text: str, field: str = "Value") -> str:
    """Strip surrounding whitespace and reject empty input"""
    value = (text or "").strip()
    if not value:
        raise InvalidInput(f"{field} is required")
    return value
