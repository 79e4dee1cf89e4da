from __future__ import annotations

import sqlite3
from contextlib import closing
from datetime import datetime, timezone

from batch_namer.ports.storage_port import StoragePort


class SQLiteStorage(StoragePort):
    def __init__(self, sqlite_path: str) -> None:
        self._sqlite_path = sqlite_path
        self._ensure_schema()

    def read_slot(self, key: str) -> str | None:
        try:
            with closing(self._connect()) as conn, conn:
                row = conn.execute(
                    """
                    SELECT payload
                    FROM session_slots
                    WHERE slot_key = ?
                    """,
                    (key,),
                ).fetchone()
            if row is None:
                return None
            return row[0]
        except sqlite3.Error as exc:
            raise RuntimeError("Failed to read session slot") from exc

    def write_slot(self, key: str, payload: str) -> None:
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(
                    """
                    INSERT INTO session_slots(slot_key, payload, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(slot_key) DO UPDATE SET
                        payload = excluded.payload,
                        updated_at = excluded.updated_at
                    """,
                    (key, payload, datetime.now(timezone.utc).isoformat()),
                )
        except sqlite3.Error as exc:
            raise RuntimeError("Failed to write session slot") from exc

    def delete_slot(self, key: str) -> None:
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute("DELETE FROM session_slots WHERE slot_key = ?", (key,))
        except sqlite3.Error as exc:
            raise RuntimeError("Failed to delete session slot") from exc

    def _ensure_schema(self) -> None:
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS session_slots(
                        slot_key TEXT PRIMARY KEY,
                        payload TEXT NOT NULL,
                        updated_at TEXT
                    )
                    """
                )
        except sqlite3.Error as exc:
            raise RuntimeError("Failed to initialize schema") from exc

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self._sqlite_path)
