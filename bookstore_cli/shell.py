import logging
import click
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from bookstore.errors import BookstoreError, SaveError
from bookstore.sa.models import Book
from bookstore.sa.repositories import BookRepository, PublisherRepository, PurchaseRepository
from .utils import (
    BANNER_RULE, PRICE, BOOK_ID, required_text, format_price,
    print_books, print_purchases, print_error
)

logger = logging.getLogger(__name__)

MENU = [
    ("1", "Add a book"),
    ("2", "List all books"),
    ("3", "Buy a book"),
    ("4", "List all purchases"),
    ("5", "Exit"),
]
EXIT_CHOICE = "5"

class BookstoreShell:
    """Interactive menu over the bookstore repositories.

    Every action runs against the single session passed in; the caller owns
    its lifetime.
    """

    def __init__(self, session: Session):
        self.session = session
        self.books = BookRepository(session)
        self.publishers = PublisherRepository(session)
        self.purchases = PurchaseRepository(session)
        self._actions = {
            "1": self.add_book,
            "2": self.list_books,
            "3": self.buy_book,
            "4": self.list_purchases,
        }

    def run(self) -> None:
        """Show the menu and handle choices until the operator exits"""
        while True:
            self.print_menu()
            choice = click.prompt("Option", default="", show_default=False).strip()

            if choice == EXIT_CHOICE:
                logger.debug("Exit selected")
                return

            action = self._actions.get(choice)
            if action is None:
                click.echo(click.style("Invalid option. Please select a valid option.", fg='yellow'))
                continue

            self.dispatch(action)

    def dispatch(self, action) -> None:
        """Run one menu action, reporting failures without leaving the loop"""
        try:
            action()
        except SaveError as e:
            print_error(f"Could not save: {e}")
        except BookstoreError as e:
            print_error(str(e))
        except SQLAlchemyError as e:
            logger.debug("Database error in %s", action.__name__, exc_info=True)
            self.session.rollback()
            print_error(f"Database error: {e.__class__.__name__}: {e}")

    def print_menu(self) -> None:
        click.echo(BANNER_RULE)
        click.echo(click.style("Welcome to the Book Store", fg='blue', bold=True))
        click.echo(BANNER_RULE)
        click.echo("Please select an option:")
        for key, label in MENU:
            click.echo(f"{key} - {label}")
        click.echo(BANNER_RULE)

    def add_book(self) -> None:
        click.echo("Please enter the book information:")
        title = click.prompt("Title", type=required_text("Title"))
        author = click.prompt("Author", type=required_text("Author"))
        price = click.prompt("Price", type=PRICE)
        publisher_name = click.prompt("Publisher", type=required_text("Publisher"))

        book = Book(
            title=title,
            author=author,
            price=price,
            publisher=self.publishers.get_or_create(publisher_name)
        )
        self.books.insert_book(book)
        click.echo(click.style("Book added.", fg='green'))

    def list_books(self) -> None:
        print_books(self.books.get_all_books())

    def buy_book(self) -> None:
        book_id = click.prompt("Please enter the ID of the book you want to buy", type=BOOK_ID)
        book = self.books.get_book_by_id(book_id)
        if book is None:
            click.echo(click.style("Book not found.", fg='yellow'))
            return

        name = click.prompt("Please enter your name", type=required_text("Name"))
        address = click.prompt("Please enter your address", type=required_text("Address"))
        click.echo(f"You are buying the book: {book.title}, Price: {format_price(book.price)}")
        card = click.prompt("Please enter your credit card number", type=required_text("Credit card number"))

        self.books.buy_book(book, name, address, card)
        click.echo("Thank you for your purchase!")
        click.echo(click.style("Book purchased.", fg='green'))

        self.list_purchases()

    def list_purchases(self) -> None:
        print_purchases(self.purchases.get_all_purchases())
