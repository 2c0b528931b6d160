# src/prepdeck/stores/sqlite_kv.py
"""SQLite key-value backend implementation."""

import sqlite3
from pathlib import Path

from prepdeck.stores.base import KeyValueBackend


class SQLiteBackend(KeyValueBackend):
    """SQLite-based key-value backend."""

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite backend."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()

    def get(self, key: str) -> str | None:
        """Retrieve the value stored under key."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cursor.fetchone()
            return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        """Store a value, overwriting if it exists."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                (key, value),
            )
            conn.commit()
