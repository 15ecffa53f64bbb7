# bookstore_cli/main.py
import logging
import click
from sqlalchemy.exc import SQLAlchemyError

from bookstore.config import DatabaseSettings
from bookstore.sa.database import Database
from .shell import BookstoreShell

logger = logging.getLogger(__name__)

def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

@click.command()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL (defaults to the BOOKSTORE_DB_* settings or sqlite:///bookstore.db)')
@click.option('--verbose/--no-verbose', default=False, help='Show debug logging')
def cli(database_url, verbose):
    """Book Store console: add, list and buy books"""
    configure_logging(verbose)

    settings = DatabaseSettings.from_env()
    if database_url:
        settings.url = database_url

    try:
        db = Database.from_settings(settings)
        db.init_db()
    except (SQLAlchemyError, ValueError, ImportError) as e:
        logger.debug("Could not open database", exc_info=True)
        raise click.ClickException(f"Could not open database: {e}")

    logger.info("Using database %s", settings.describe())
    try:
        with db.get_db() as session:
            BookstoreShell(session).run()
    finally:
        db.dispose()

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
