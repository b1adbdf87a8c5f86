import sqlite3
from pathlib import Path
import logging
from typing import Optional
from mind_it.config.settings import settings
from mind_it.services.errors import StorageError

logger = logging.getLogger(__name__)

MIGRATIONS = [
    """
    -- Named slots mirroring browser local storage
    CREATE TABLE IF NOT EXISTS local_storage (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    );
    """
]

class LocalStore:
    """Key/value slots persisted in SQLite"""

    def __init__(self, db_path=None):
        self.db_path = str(db_path or settings.DEFAULT_DB_PATH)
        # A single connection keeps ":memory:" databases alive between calls
        self.conn = self._connect()
        logger.info(f"Initialized LocalStore with db_path: {self.db_path}")
        self.initialize()

    def _connect(self) -> sqlite3.Connection:
        try:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path, check_same_thread=False)
            if self.db_path != ":memory:":
                conn.execute("PRAGMA journal_mode = WAL")
            conn.execute("PRAGMA synchronous = NORMAL")
            return conn
        except sqlite3.Error as e:
            logger.error(f"Failed to open local store: {e}")
            raise StorageError(f"Failed to open local store: {e}")

    def initialize(self):
        """Initialize database schema"""
        try:
            for migration in MIGRATIONS:
                self.conn.executescript(migration)
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to initialize local store: {e}")
            raise StorageError(f"Failed to initialize local store: {e}")

    def get_item(self, key: str) -> Optional[str]:
        try:
            row = self.conn.execute(
                "SELECT value FROM local_storage WHERE key = ?", (key,)
            ).fetchone()
            return row[0] if row else None
        except sqlite3.Error as e:
            logger.error(f"Failed to read slot {key}: {e}")
            raise StorageError(f"Failed to read slot {key}: {e}")

    def set_item(self, key: str, value: str) -> None:
        try:
            self.conn.execute(
                """
                INSERT INTO local_storage (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value)
            )
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to write slot {key}: {e}")
            raise StorageError(f"Failed to write slot {key}: {e}")

    def remove_item(self, key: str) -> None:
        try:
            self.conn.execute("DELETE FROM local_storage WHERE key = ?", (key,))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to remove slot {key}: {e}")
            raise StorageError(f"Failed to remove slot {key}: {e}")

    def close(self):
        """Close the underlying connection"""
        try:
            self.conn.close()
        except sqlite3.Error as e:
            logger.warning(f"Error closing local store: {e}")
