from __future__ import annotations

import logging
import sqlite3

from global_styles.errors import StorageError

logger = logging.getLogger(__name__)


class Database:
    """SQLite connection holder for the option table."""

    def __init__(self, path: str = ":memory:") -> None:
        self._path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def path(self) -> str:
        return self._path

    def connect(self) -> None:
        """Open the connection; file databases switch to WAL mode."""
        # Shared across the threads of the Flask dev server.
        self._conn = sqlite3.connect(self._path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")
        logger.debug("connected to %s", self._path)

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        return self.connection.execute(sql, params)

    def fetch_one(self, sql: str, params: tuple = ()) -> sqlite3.Row | None:
        """Execute a query and return the first row, or None."""
        return self.execute(sql, params).fetchone()

    def commit(self) -> None:
        self.connection.commit()

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Database not connected", path=self._path)
        return self._conn
