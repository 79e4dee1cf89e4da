from __future__ import annotations

import os

SQLITE_PATH = os.getenv("SQLITE_PATH", "./batch_namer.db")
STATE_KEY = os.getenv("STATE_KEY", "batch-namer-state")
EXPORT_PREFIX = os.getenv("EXPORT_PREFIX", "renamed_files")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PERSIST_ENABLED = os.getenv("PERSIST_ENABLED", "1").strip().lower() not in {"0", "false", "no", "off"}
