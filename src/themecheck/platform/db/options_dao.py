"""Data access object for the options table."""

import json
import sqlite3
import threading
from typing import Any, final

from themecheck.platform.logging import logger


@final
class OptionsDAO:
    """SQLite-backed option store holding JSON-encoded values."""

    conn: sqlite3.Connection
    _lock: threading.Lock

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize DAO.

        Args:
            conn: Database connection with the ``options`` schema in place.
        """
        self.conn = conn
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Return the decoded option value, or None when missing or not valid JSON.

        Raises:
            sqlite3.Error: The read failed, so callers can tell it from a missing option.
        """
        try:
            with self._lock:
                cursor = self.conn.cursor()
                _ = cursor.execute(
                    "SELECT option_value FROM options WHERE option_name = ?",
                    (key,),
                )
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error("Database error reading option '%s': %s", key, e)
            raise

        if row is None:
            return None
        try:
            return json.loads(row[0])
        except (RecursionError, TypeError, ValueError) as e:
            logger.warning("Option '%s' holds invalid JSON: %s", key, e)
            return None

    def set(self, key: str, value: Any) -> None:
        """Insert or replace the option value.

        Raises:
            TypeError: ``value`` is not JSON-serializable.
            sqlite3.Error: The write failed; the transaction is rolled back.
        """
        encoded = json.dumps(value, sort_keys=True)
        with self._lock:
            try:
                cursor = self.conn.cursor()
                _ = cursor.execute(
                    """
                    INSERT INTO options (option_name, option_value)
                    VALUES (?, ?)
                    ON CONFLICT(option_name) DO UPDATE SET
                        option_value = excluded.option_value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, encoded),
                )
                self.conn.commit()
            except sqlite3.Error as e:
                logger.error("Database error writing option '%s': %s", key, e)
                self.conn.rollback()
                raise


__all__ = ["OptionsDAO"]
