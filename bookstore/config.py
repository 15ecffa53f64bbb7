# bookstore/config.py
"""
Database connection settings.

Resolution order:
    1. DATABASE_URL, a complete SQLAlchemy URL
    2. BOOKSTORE_DB_SERVER (plus BOOKSTORE_DB_NAME, BOOKSTORE_DB_TRUSTED,
       BOOKSTORE_DB_USER, BOOKSTORE_DB_PASSWORD, BOOKSTORE_DB_DRIVER),
       composed into a SQL Server URL
    3. A local SQLite file
"""
import os
from dataclasses import dataclass
from typing import Optional, Mapping

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

DEFAULT_SQLITE_URL = "sqlite:///bookstore.db"
DEFAULT_DB_NAME = "Books"
DEFAULT_ODBC_DRIVER = "ODBC Driver 17 for SQL Server"

TRUE_VALUES = {"1", "true", "yes", "on"}

def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUE_VALUES

@dataclass
class DatabaseSettings:
    """Settings for the bookstore database connection"""
    url: Optional[str] = None
    server: Optional[str] = None
    database: str = DEFAULT_DB_NAME
    trusted_connection: bool = True
    username: Optional[str] = None
    password: Optional[str] = None
    driver: str = DEFAULT_ODBC_DRIVER
    echo: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DatabaseSettings":
        """Build settings from environment variables"""
        env = os.environ if environ is None else environ
        return cls(
            url=env.get("DATABASE_URL") or None,
            server=env.get("BOOKSTORE_DB_SERVER") or None,
            database=env.get("BOOKSTORE_DB_NAME") or DEFAULT_DB_NAME,
            trusted_connection=_as_bool(env.get("BOOKSTORE_DB_TRUSTED"), True),
            username=env.get("BOOKSTORE_DB_USER") or None,
            password=env.get("BOOKSTORE_DB_PASSWORD") or None,
            driver=env.get("BOOKSTORE_DB_DRIVER") or DEFAULT_ODBC_DRIVER,
            echo=_as_bool(env.get("BOOKSTORE_SQL_ECHO"), False),
        )

    @property
    def connection_string(self) -> str:
        """The SQLAlchemy URL these settings resolve to"""
        if self.url:
            return self.url
        if self.server:
            return self._sql_server_url().render_as_string(hide_password=False)
        return DEFAULT_SQLITE_URL

    def _sql_server_url(self) -> URL:
        query = {"driver": self.driver}
        if self.trusted_connection:
            query["trusted_connection"] = "yes"
            username = password = None
        else:
            if not self.username:
                raise ValueError("BOOKSTORE_DB_USER is required when BOOKSTORE_DB_TRUSTED is false")
            username, password = self.username, self.password

        return URL.create(
            "mssql+pyodbc",
            username=username,
            password=password,
            host=self.server,
            database=self.database,
            query=query,
        )

    def describe(self) -> str:
        """Connection target with any password masked, for log output"""
        if self.url:
            try:
                return make_url(self.url).render_as_string(hide_password=True)
            except ArgumentError:
                return self.url
        if self.server:
            return self._sql_server_url().render_as_string(hide_password=True)
        return DEFAULT_SQLITE_URL
