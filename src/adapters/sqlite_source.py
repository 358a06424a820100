"""SQLite record source adapter.

Implements the core RecordSource port against the database written by the
Discord crawler extension (channels, users, messages).
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path
from typing import List
from urllib.parse import quote

from core.errors import ArchiveFetchError
from core.models import Record

LOGGER = logging.getLogger(__name__)

# Missing channel/user rows are tolerated: messages survive user or channel
# deletion in the export, so LEFT JOIN with placeholders instead of dropping.
FETCH_ALL_QUERY = """
    SELECT
        COALESCE(c.name, 'Unknown') AS channel_name,
        COALESCE(u.username, 'Unknown') AS username,
        COALESCE(m.timestamp, '') AS timestamp,
        COALESCE(m.content, '') AS content
    FROM messages m
    LEFT JOIN channels c ON m.channel_id = c.id
    LEFT JOIN users u ON m.user_id = u.user_id
    ORDER BY m.timestamp ASC
"""


def _as_text(value: object) -> str:
    # Column affinity is loose in SQLite; DATETIME cells may come back numeric.
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class SQLiteRecordSource:
    """Thin SQLite reader that satisfies the RecordSource contract."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        # Read-only URI: a wrong path must fail instead of creating an empty db.
        uri = f"file:{quote(os.path.abspath(self._db_path))}?mode=ro"
        conn = sqlite3.connect(uri, uri=True)
        conn.row_factory = sqlite3.Row
        return conn

    def fetch_all_records(self) -> List[Record]:
        """Return every message joined with its channel and user, oldest first."""

        if not Path(self._db_path).is_file():
            raise ArchiveFetchError(f"Database not found: {self._db_path}")

        try:
            conn = self._connect()
            try:
                rows = conn.execute(FETCH_ALL_QUERY).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise ArchiveFetchError(f"Failed to read {self._db_path}: {exc}") from exc

        LOGGER.debug("Query returned %s rows from %s", len(rows), self._db_path)
        return [
            Record(
                channel_name=_as_text(row["channel_name"]),
                username=_as_text(row["username"]),
                timestamp=_as_text(row["timestamp"]),
                content=_as_text(row["content"]),
            )
            for row in rows
        ]
