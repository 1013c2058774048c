"""SQLite implementation of the key-value store."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Optional

from .base import KeyValueStore


class SQLiteStore(KeyValueStore):
    """Persist values in a single SQLite table."""

    def __init__(self, db_path: str | Path):
        self.db_path = str(Path(db_path).expanduser())
        self._conn = sqlite3.connect(self.db_path)
        self._ensure_schema()

    # ------------------------------------------------------------------
    # Schema management
    def _ensure_schema(self) -> None:
        self._execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """
        )

    # ------------------------------------------------------------------
    # Helper methods
    def _execute(self, query: str, *params: Any) -> None:
        cur = self._conn.cursor()
        cur.execute(query, params)
        self._conn.commit()

    # ------------------------------------------------------------------
    # Store API
    def get(self, key: str) -> Optional[str]:
        cur = self._conn.cursor()
        cur.execute("SELECT value FROM kv WHERE key = ?", (key,))
        row = cur.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        self._execute(
            "INSERT INTO kv (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            key,
            value,
        )

    def delete(self, key: str) -> None:
        self._execute("DELETE FROM kv WHERE key = ?", key)

    def close(self) -> None:
        self._conn.close()
