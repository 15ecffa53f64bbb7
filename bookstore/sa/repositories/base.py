# bookstore/sa/repositories/base.py
import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from bookstore.errors import SaveError

logger = logging.getLogger(__name__)

class BaseRepository:
    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _commit(self, action: str) -> None:
        """Commit pending changes, rolling back if the database rejects them.

        Args:
            action: Short description of the change, used in messages

        Raises:
            SaveError: If a constraint (required field, foreign key) is violated
            SQLAlchemyError: For connection and other database failures
        """
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("Could not %s: %s", action, e.orig)
            raise SaveError(str(e.orig)) from e
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Database error while trying to %s", action)
            raise
