import click
from decimal import Decimal
from typing import Callable, Iterable, Any

from bookstore.errors import InvalidInput
from bookstore.parsing import parse_price, parse_book_id, parse_required_text
from bookstore.sa.models import Book, Purchase

BANNER_RULE = "=" * 31
LIST_RULE = "-" * 32

class _ParsedInput(click.ParamType):
    """Click parameter type backed by one of the bookstore parsers.

    click.prompt re-prompts whenever conversion fails, so invalid input
    never leaves the prompt.
    """

    def __init__(self, name: str, parser: Callable[[str], Any]):
        self.name = name
        self._parser = parser

    def convert(self, value, param, ctx):
        if not isinstance(value, str):
            return value
        try:
            return self._parser(value)
        except InvalidInput as e:
            self.fail(str(e), param, ctx)

PRICE = _ParsedInput("price", parse_price)
BOOK_ID = _ParsedInput("book id", parse_book_id)

def required_text(field: str) -> click.ParamType:
    """Parameter type for a required, non-blank text field"""
    return _ParsedInput(field.lower(), lambda value: parse_required_text(value, field))

def format_price(price: Decimal) -> str:
    """Format a price as currency, e.g. $1,234.50"""
    return f"${price:,.2f}"

def print_header(title: str) -> None:
    click.echo(LIST_RULE)
    click.echo(click.style(title, fg='blue'))
    click.echo(LIST_RULE)

def print_books(books: Iterable[Book]) -> None:
    """Print one line per book"""
    print_header("List of All Books")
    for book in books:
        click.echo(
            f"ID: {book.id}, Title: {book.title}, Author: {book.author}, "
            f"Price: {format_price(book.price)}, Publisher: {book.publisher.name}"
        )

def print_purchases(purchases: Iterable[Purchase]) -> None:
    """Print one line per purchase"""
    print_header("List of All Purchases")
    for purchase in purchases:
        click.echo(
            f"ID: {purchase.id}, Book Title: {purchase.book.title}, "
            f"Customer Name: {purchase.user_name}, Book Id: {purchase.book_id}"
        )

def print_error(message: str) -> None:
    click.echo(click.style(message, fg='red'), err=True)
