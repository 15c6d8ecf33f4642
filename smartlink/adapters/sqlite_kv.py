"""
SQLite Key-Value Adapter.

Implements KeyValueStorePort on a single ``kv_store`` table. Useful when the
data directory is shared with other tooling that prefers one file.
"""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime

from smartlink.core.ports.storage import ReadFailedError, WriteFailedError

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""


class SQLiteKeyValueStore:
    """SQLite implementation of KeyValueStorePort."""

    def __init__(self, db_path: str, connection: sqlite3.Connection | None = None):
        self.db_path = db_path
        self._external_conn = connection
        self._ensure_schema()

    def _get_conn(self) -> sqlite3.Connection:
        """Get database connection (uses external if provided)."""
        if self._external_conn is not None:
            return self._external_conn
        return sqlite3.connect(self.db_path)

    def _should_close(self) -> bool:
        """Whether to close connection after use."""
        return self._external_conn is None

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(SCHEMA)
            conn.commit()
        finally:
            if self._should_close():
                conn.close()

    def read(self, key: str) -> str | None:
        try:
            conn = self._get_conn()
            try:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                ).fetchone()
            finally:
                if self._should_close():
                    conn.close()
        except sqlite3.Error as e:
            raise ReadFailedError(key, str(e)) from e
        return row[0] if row else None

    def write(self, key: str, value: str) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value, datetime.now(UTC).isoformat()),
                )
                conn.commit()
            finally:
                if self._should_close():
                    conn.close()
        except sqlite3.Error as e:
            raise WriteFailedError(key, str(e)) from e

    def delete(self, key: str) -> bool:
        try:
            conn = self._get_conn()
            try:
                cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                conn.commit()
                deleted = cursor.rowcount > 0
            finally:
                if self._should_close():
                    conn.close()
        except sqlite3.Error as e:
            raise WriteFailedError(key, str(e)) from e
        return deleted
