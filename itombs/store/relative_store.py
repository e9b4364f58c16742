"""SQLite store for family tree relatives."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from itombs.config import settings
from itombs.errors import NotFound, TransientError, ValidationError
from itombs.logger import get_logger
from itombs.models import RelativeRecord

logger = get_logger(__name__)


class RelativeStore:
    """Store relative records keyed by owning user."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or settings.database.tree_db_path
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, mapping database failures to TransientError."""
        try:
            with sqlite3.connect(self.db_path) as conn:
                conn.row_factory = sqlite3.Row
                yield conn
        except sqlite3.Error as e:
            logger.error("Tree database error (%s): %s", self.db_path, e)
            raise TransientError(str(e)) from e

    def _init_db(self):
        """Initialize database schema."""
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS tree (
                    tree_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL,
                    relative_name TEXT NOT NULL,
                    relationship TEXT NOT NULL,
                    profile_url TEXT,
                    created_at TEXT DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_tree_user ON tree(user_id)")

    def list_relatives(self, owner_id: int) -> list[RelativeRecord]:
        """Get all relatives of a user in insertion order."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM tree WHERE user_id = ? ORDER BY tree_id", (owner_id,)
            ).fetchall()
            return [self._row_to_record(row) for row in rows]

    def get_relative(self, relative_id: int) -> Optional[RelativeRecord]:
        """Get a relative by ID."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM tree WHERE tree_id = ?", (relative_id,)
            ).fetchone()
            return self._row_to_record(row) if row else None

    def add_relative(
        self,
        owner_id: Optional[int],
        name: Optional[str],
        relationship: Optional[str],
        profile_link: Optional[str] = None,
    ) -> RelativeRecord:
        """Add a relative and return the stored record."""
        name = (name or "").strip()
        relationship = (relationship or "").strip()
        if owner_id is None or not name or not relationship:
            raise ValidationError("Missing required fields")

        with self._connect() as conn:
            cursor = conn.execute("""
                INSERT INTO tree (user_id, relative_name, relationship, profile_url)
                VALUES (?, ?, ?, ?)
            """, (owner_id, name, relationship, (profile_link or "").strip() or None))
            relative_id = cursor.lastrowid

        logger.info("Added %s %r to tree of user %s", relationship, name, owner_id)
        return self.get_relative(relative_id)

    def delete_relative(self, relative_id: int) -> bool:
        """Delete a relative by ID."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM tree WHERE tree_id = ?", (relative_id,))
            if cursor.rowcount == 0:
                raise NotFound(f"Relative {relative_id} not found")
        logger.info("Deleted relative %s", relative_id)
        return True

    def _row_to_record(self, row: sqlite3.Row) -> RelativeRecord:
        """Convert database row to RelativeRecord."""
        return RelativeRecord(
            tree_id=row["tree_id"],
            user_id=row["user_id"],
            relative_name=row["relative_name"],
            relationship=row["relationship"],
            profile_url=row["profile_url"],
        )
