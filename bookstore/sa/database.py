# bookstore/sa/database.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool, QueuePool

from bookstore.config import DatabaseSettings
from bookstore.sa.models import Base

logger = logging.getLogger(__name__)

class Database:
    def __init__(self, connection_string: Optional[str] = None, **engine_kwargs):
        """Initialize database connection

        Args:
            connection_string: Database connection string (e.g. "sqlite:///bookstore.db")
                              If None, it is resolved from the environment by DatabaseSettings
            engine_kwargs: Additional keyword arguments to pass to create_engine
        """
        if connection_string is None:
            settings = DatabaseSettings.from_env()
            connection_string = settings.connection_string
            engine_kwargs.setdefault("echo", settings.echo)

        self.connection_string = connection_string
        self.is_sqlite = self.connection_string.startswith("sqlite")

        # SQLite-specific settings
        if self.is_sqlite:
            engine_kwargs.setdefault("poolclass", NullPool)

        # Server database settings
        else:
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)
            engine_kwargs.setdefault("poolclass", QueuePool)
            engine_kwargs.setdefault("pool_pre_ping", True)

        self.engine = create_engine(
            self.connection_string,
            **engine_kwargs
        )

        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        # Create sessionmaker
        self._SessionFactory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings, **engine_kwargs) -> "Database":
        """Create a database from resolved settings"""
        engine_kwargs.setdefault("echo", settings.echo)
        return cls(settings.connection_string, **engine_kwargs)

    @contextmanager
    def get_db(self) -> Iterator[Session]:
        """Context manager for database sessions

        The session is committed on normal exit, rolled back on any error
        and closed on every path.
        """
        session: Session = self._SessionFactory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_db(self) -> None:
        """Initialize database schema"""
        logger.debug("Creating schema on %s", self.engine.url.render_as_string(hide_password=True))
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        return self._SessionFactory()

    def dispose(self) -> None:
        """Release all pooled connections"""
        self.engine.dispose()

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Enforce foreign keys on every SQLite connection"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()
