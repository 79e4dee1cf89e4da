from __future__ import annotations

import os
import sqlite3
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from batch_namer.adapters.sqlite_storage import SQLiteStorage
from batch_namer.services.persistence_service import PersistenceService


def main() -> None:
    db_path = os.getenv("SQLITE_PATH", "./batch_namer.db")
    state_key = os.getenv("STATE_KEY", "batch-namer-state")
    print("DB:", db_path)

    conn = sqlite3.connect(db_path)
    try:
        print("Slots:")
        for row in conn.execute(
            "SELECT slot_key, length(payload), updated_at FROM session_slots ORDER BY slot_key"
        ):
            print("-", row)
    except sqlite3.Error as exc:
        raise SystemExit(f"Cannot read {db_path}: {exc}")
    finally:
        conn.close()

    state = PersistenceService(SQLiteStorage(db_path), state_key).load()
    print(f"\nSession {state_key}:")
    print("files:", len(state.files))
    print("undo:", len(state.history))
    print("redo:", len(state.redo_stack))
    for index, item in enumerate(state.files, start=1):
        print(f"{index:>4}  {item.original_full_name}  ->  {item.full_name}")


if __name__ == "__main__":
    main()
