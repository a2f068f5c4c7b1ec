import logging
import sqlite3
from typing import Optional

from pystreamguide.dao.preference_storage.base import BasePreferenceStorage

logger = logging.getLogger(__name__)


class PreferenceStorageSQLite(BasePreferenceStorage):
    TABLE = "preferences"

    def __init__(self, filepath: str) -> None:
        self.conn: sqlite3.Connection = sqlite3.connect(filepath)
        self.conn.row_factory = sqlite3.Row
        self._create_schema()
        logger.debug(f"Initialized SQLite preference storage at {filepath}")

    def _create_schema(self) -> None:
        cursor: sqlite3.Cursor = self.conn.cursor()
        cursor.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {self.TABLE} (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            ) WITHOUT ROWID
            """
        )
        self.conn.commit()

    def get(self, key: str) -> Optional[str]:
        cursor: sqlite3.Cursor = self.conn.cursor()
        cursor.execute(f"SELECT value FROM {self.TABLE} WHERE key = ?", (key,))
        row: Optional[sqlite3.Row] = cursor.fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        cursor: sqlite3.Cursor = self.conn.cursor()
        cursor.execute(
            f"""
            INSERT OR REPLACE INTO {self.TABLE} (key, value)
            VALUES (?, ?)
            """,
            (key, value),
        )
        self.conn.commit()

    def delete(self, key: str) -> None:
        cursor: sqlite3.Cursor = self.conn.cursor()
        cursor.execute(f"DELETE FROM {self.TABLE} WHERE key = ?", (key,))
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()
